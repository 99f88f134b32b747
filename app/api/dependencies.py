"""FastAPI dependency providers for the task services"""

from fastapi import Depends
from supabase import Client

from app import config
from app.infra.supabase import RealtimeBroadcaster, get_supabase_client
from app.infra.supabase.repositories import RepositoryFactory
from app.infra.supabase.repositories.tasks import TaskRepository
from app.services.task import TaskCreationService, TaskQueryService


def get_task_repository(client: Client = Depends(get_supabase_client)) -> TaskRepository:
    return RepositoryFactory(client).tasks


def get_event_publisher() -> RealtimeBroadcaster:
    if not config.SUPABASE_URL or not config.SUPABASE_SERVICE_ROLE_KEY:
        raise ValueError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set")
    return RealtimeBroadcaster(config.SUPABASE_URL, config.SUPABASE_SERVICE_ROLE_KEY)


def get_task_query_service(
    task_repo: TaskRepository = Depends(get_task_repository),
) -> TaskQueryService:
    return TaskQueryService(task_repo, tz=config.get_local_timezone())


def get_task_creation_service(
    task_repo: TaskRepository = Depends(get_task_repository),
    publisher: RealtimeBroadcaster = Depends(get_event_publisher),
) -> TaskCreationService:
    return TaskCreationService(
        task_repo,
        publisher,
        channel=config.TASKS_CHANNEL,
        tenant_id=config.PLACEHOLDER_TENANT_ID,
        tz=config.get_local_timezone(),
    )
