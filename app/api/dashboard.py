"""Today dashboard pages"""

import logging
from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, RedirectResponse

from app import config
from app.api.dependencies import get_task_query_service
from app.exceptions import StoreError
from app.services.dashboard_renderer import DashboardRenderer
from app.services.task import TaskQueryService

logger = logging.getLogger(__name__)

DASHBOARD_PATH = "/dashboard/today"

router = APIRouter(prefix=DASHBOARD_PATH, tags=["dashboard"])


def get_dashboard_renderer() -> DashboardRenderer:
    return DashboardRenderer(DASHBOARD_PATH, tz=config.get_local_timezone())


@router.get("", response_class=HTMLResponse)
async def dashboard_today(
    service: TaskQueryService = Depends(get_task_query_service),
    renderer: DashboardRenderer = Depends(get_dashboard_renderer),
) -> HTMLResponse:
    """List today's pending tasks with a completion button per row."""
    try:
        tasks = await service.fetch_tasks_due_today()
    except StoreError as e:
        logger.error(f"Failed to load today's tasks: {e.message}")
        return HTMLResponse(renderer.render(load_error=e.message), status_code=500)

    return HTMLResponse(renderer.render(tasks=tasks))


@router.post("/tasks/{task_id}/complete", response_class=HTMLResponse)
async def dashboard_complete_task(
    task_id: str,
    service: TaskQueryService = Depends(get_task_query_service),
    renderer: DashboardRenderer = Depends(get_dashboard_renderer),
):
    """
    Complete a task, then send the browser back to a fresh listing.

    On failure the current listing is re-rendered with a failure banner.
    """
    try:
        await service.mark_task_complete(task_id)
    except StoreError as e:
        logger.error(f"Failed to complete task {task_id}: {e.message}")
        try:
            tasks = await service.fetch_tasks_due_today()
        except StoreError as load_error:
            return HTMLResponse(renderer.render(load_error=load_error.message), status_code=500)
        return HTMLResponse(renderer.render(tasks=tasks, mutation_error=e.message), status_code=500)

    return RedirectResponse(DASHBOARD_PATH, status_code=303)
