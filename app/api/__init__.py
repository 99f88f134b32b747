# API module exports
from app.api import dashboard, health, tasks
from app.api.base import api_router

__all__ = ["dashboard", "health", "tasks", "api_router"]
