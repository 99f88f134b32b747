"""Task repository"""
from datetime import datetime
from typing import List, Optional

from supabase import Client  # type: ignore

from app.models.task import Task, TaskCreate, TaskStatus, TaskUpdate

from .base import BaseRepository

TASK_LIST_COLUMNS = "id, title, related_id, type, due_at, status"


class TaskRepository(BaseRepository[Task, TaskCreate, TaskUpdate]):
    """Repository for task operations"""

    def __init__(self, client: Client):
        super().__init__(client, "tasks", Task)

    async def find_due_between(
        self,
        start: datetime,
        end: datetime,
        status: TaskStatus = TaskStatus.PENDING,
    ) -> List[Task]:
        """Find tasks with start <= due_at < end and the given status

        Args:
            start: Inclusive lower bound (timezone-aware)
            end: Exclusive upper bound (timezone-aware)
            status: Status to match

        Returns:
            Tasks ordered by due_at, earliest first
        """
        query = (
            self._client.table(self._table_name)
            .select(TASK_LIST_COLUMNS)
            .gte("due_at", start.isoformat())
            .lt("due_at", end.isoformat())
            .eq("status", status.value)
            .order("due_at", desc=False)
        )
        response = self._execute(query)
        return self._to_models(response.data)

    async def mark_completed(self, task_id: str) -> Optional[Task]:
        """Mark a task as completed (no-op rows are not an error)"""
        return await self.update(task_id, TaskUpdate(status=TaskStatus.COMPLETED))
