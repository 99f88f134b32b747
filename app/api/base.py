from fastapi import APIRouter
from app.api import dashboard, health, tasks

api_router = APIRouter()

# Include all sub-routers
api_router.include_router(tasks.router)
api_router.include_router(dashboard.router)
api_router.include_router(health.router)
