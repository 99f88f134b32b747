"""Task API endpoints"""

import logging
from fastapi import APIRouter, Depends, Request

from app.api.dependencies import get_task_creation_service, get_task_query_service
from app.models.task import CompleteTaskResponse, CreateTaskResponse, TaskListResponse
from app.services.task import TaskCreationService, TaskQueryService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.post("", response_model=CreateTaskResponse)
async def create_task(
    request: Request,
    service: TaskCreationService = Depends(get_task_creation_service),
):
    """
    Create a task for an application.

    Body: {"application_id": str, "task_type": "call" | "email" | "review", "due_at": ISO-8601}

    Returns:
        {"success": true, "task_id": ...}

    Raises:
        400: Invalid body, missing fields, unknown task_type or due_at not in the future
        405: Any method other than POST
        500: Insert failed
    """
    body = await request.body()
    task_id = await service.create_task(request.method, body)
    return {"success": True, "task_id": task_id}


@router.get("/today", response_model=TaskListResponse)
async def list_tasks_due_today(service: TaskQueryService = Depends(get_task_query_service)):
    """Pending tasks due today, earliest first"""
    tasks = await service.fetch_tasks_due_today()
    return {"tasks": tasks, "count": len(tasks)}


@router.post("/{task_id}/complete", response_model=CompleteTaskResponse)
async def complete_task(task_id: str, service: TaskQueryService = Depends(get_task_query_service)):
    """Mark a task completed (repeat calls are harmless)"""
    await service.mark_task_complete(task_id)
    return {"success": True}
