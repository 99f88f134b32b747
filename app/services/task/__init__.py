from .task_query_service import TaskQueryService
from .task_creation_service import TaskCreationService, build_task_title

__all__ = ["TaskQueryService", "TaskCreationService", "build_task_title"]
