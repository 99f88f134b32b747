"""
Today's Task Service

Reads tasks due today and marks tasks complete for the dashboard.
"""

import logging
from datetime import datetime, tzinfo
from typing import List, Optional

from app.infra.supabase.repositories.tasks import TaskRepository
from app.models.task import Task, TaskStatus
from app.utils.datetime_helper import now_local, today_window

logger = logging.getLogger(__name__)


class TaskQueryService:
    """Query/mutation client for the today dashboard"""

    def __init__(self, task_repo: TaskRepository, tz: Optional[tzinfo] = None):
        self.task_repo = task_repo
        self.tz = tz

    async def fetch_tasks_due_today(self, now: Optional[datetime] = None) -> List[Task]:
        """
        Get pending tasks due within the current local day.

        Every call re-queries the store.

        Args:
            now: Reference time; defaults to the wall clock

        Returns:
            Pending tasks with start-of-day <= due_at < start-of-tomorrow, earliest first

        Raises:
            StoreError: If the query fails
        """
        if now is None:
            now = now_local(self.tz)

        start, end = today_window(now, self.tz)
        return await self.task_repo.find_due_between(start, end, status=TaskStatus.PENDING)

    async def mark_task_complete(self, task_id: str) -> None:
        """
        Set a task's status to completed.

        Unconditional single-record update; repeating it is harmless.

        Raises:
            StoreError: If the update fails
        """
        task = await self.task_repo.mark_completed(task_id)
        if task is None:
            logger.info(f"Completion of task {task_id} matched no rows")
        else:
            logger.info(f"Task {task_id} marked completed")
