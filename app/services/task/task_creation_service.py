"""
Task Creation Service

Validates inbound creation requests, inserts the task and announces it on
the realtime channel.

Flow: validate -> insert -> publish (best-effort) -> respond.
Validation checks run in a fixed order and the first failure wins.
Insert failures are fatal; publish failures are only logged.
"""

import json
import logging
from datetime import datetime, timezone, tzinfo
from typing import Any, Dict, Optional, Protocol

from pydantic import BaseModel

from app.exceptions import StoreError, TaskValidationError
from app.infra.supabase.repositories.tasks import TaskRepository
from app.models.task import TaskCreate, TaskStatus, TaskType
from app.utils.datetime_helper import parse_timestamp

logger = logging.getLogger(__name__)

TASK_CREATED_EVENT = "task.created"
REQUIRED_FIELDS = ("application_id", "task_type", "due_at")

METHOD_NOT_ALLOWED = "Method Not Allowed"
INVALID_BODY = "Invalid JSON body"
MISSING_FIELDS = "Missing required fields: application_id, task_type, or due_at"
INVALID_TASK_TYPE = "Invalid task_type: must be 'call', 'email', or 'review'"
INVALID_DUE_AT = "due_at must be a valid date and in the future"
INSERT_FAILED = "Internal Server Error during task creation"


class EventPublisher(Protocol):
    async def publish(self, channel: str, event: str, payload: Dict[str, Any]) -> None:
        ...


class CreateTaskPayload(BaseModel):
    """Validated creation request"""
    application_id: str
    task_type: TaskType
    due_at: datetime


def build_task_title(task_type: TaskType, application_id: str) -> str:
    """Default title embedding the type and the first 8 chars of the application id"""
    return f"New {task_type.value} for Application {application_id[:8]}..."


class TaskCreationService:
    """Creates tasks on behalf of external callers"""

    def __init__(
        self,
        task_repo: TaskRepository,
        publisher: Optional[EventPublisher],
        channel: str,
        tenant_id: str,
        tz: Optional[tzinfo] = None,
    ):
        self.task_repo = task_repo
        self.publisher = publisher
        self.channel = channel
        self.tenant_id = tenant_id
        self.tz = tz

    def validate(self, method: str, body: bytes, now: Optional[datetime] = None) -> CreateTaskPayload:
        """
        Run the ordered request checks.

        Args:
            method: HTTP method of the request
            body: Raw request body
            now: Reference time for the future check; defaults to the wall clock

        Returns:
            CreateTaskPayload with a parsed, timezone-aware due_at

        Raises:
            TaskValidationError: 405 for a wrong method, 400 for body/field problems
        """
        if method.upper() != "POST":
            raise TaskValidationError(METHOD_NOT_ALLOWED, status_code=405)

        try:
            data = json.loads(body)
        except (ValueError, UnicodeDecodeError):
            raise TaskValidationError(INVALID_BODY)
        if not isinstance(data, dict):
            raise TaskValidationError(INVALID_BODY)

        if not all(data.get(field) for field in REQUIRED_FIELDS):
            raise TaskValidationError(MISSING_FIELDS)

        raw_type = data["task_type"]
        if raw_type not in [t.value for t in TaskType]:
            raise TaskValidationError(INVALID_TASK_TYPE)

        try:
            due_at = parse_timestamp(data["due_at"], self.tz)
        except ValueError:
            raise TaskValidationError(INVALID_DUE_AT)

        if now is None:
            now = datetime.now(timezone.utc)
        if due_at <= now:
            raise TaskValidationError(INVALID_DUE_AT)

        return CreateTaskPayload(
            application_id=str(data["application_id"]),
            task_type=TaskType(raw_type),
            due_at=due_at,
        )

    async def create_task(self, method: str, body: bytes, now: Optional[datetime] = None) -> str:
        """
        Validate, insert and announce a new task.

        Returns:
            The generated task id

        Raises:
            TaskValidationError: Request rejected; nothing was written
            StoreError: Insert failed (generic message); nothing was published
        """
        payload = self.validate(method, body, now=now)

        task_data = TaskCreate(
            related_id=payload.application_id,
            type=payload.task_type,
            due_at=payload.due_at,
            status=TaskStatus.PENDING,
            tenant_id=self.tenant_id,
            title=build_task_title(payload.task_type, payload.application_id),
        )

        try:
            task = await self.task_repo.create(task_data)
        except StoreError as e:
            logger.error(f"Supabase insert error: {e.message}")
            raise StoreError(INSERT_FAILED) from e

        logger.info(f"Created {payload.task_type.value} task {task.id} for application {payload.application_id}")

        await self._publish_created(task.id, payload)
        return task.id

    async def _publish_created(self, task_id: str, payload: CreateTaskPayload) -> None:
        """Announce the new task; failures are logged and swallowed"""
        if self.publisher is None:
            return

        try:
            await self.publisher.publish(
                self.channel,
                TASK_CREATED_EVENT,
                {
                    "task_id": task_id,
                    "application_id": payload.application_id,
                    "task_type": payload.task_type.value,
                },
            )
        except Exception as e:
            logger.warning(f"Realtime broadcast warning for task {task_id}: {str(e)}")
