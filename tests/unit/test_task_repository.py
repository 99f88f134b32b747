"""TaskRepository query shape and error translation."""

from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import MagicMock

import httpx
import pytest

from app.exceptions import StoreError
from app.infra.supabase.repositories import RepositoryFactory
from app.infra.supabase.repositories.tasks import TASK_LIST_COLUMNS, TaskRepository
from app.models.task import TaskCreate, TaskStatus, TaskType
from tests.fakes import FakeSupabaseClient

START = datetime(2025, 1, 15, 0, 0, tzinfo=timezone.utc)
END = datetime(2025, 1, 16, 0, 0, tzinfo=timezone.utc)


def _chain_client(data=None, error: Exception | None = None) -> MagicMock:
    """MagicMock client whose builder methods all return the same query object."""
    client = MagicMock()
    query = client.table.return_value
    for name in ("select", "gte", "lt", "eq", "order", "update", "insert"):
        getattr(query, name).return_value = query
    if error is not None:
        query.execute.side_effect = error
    else:
        query.execute.return_value = SimpleNamespace(data=data or [])
    return client


async def test_find_due_between_builds_filtered_ordered_query() -> None:
    client = _chain_client()
    repo = TaskRepository(client)

    await repo.find_due_between(START, END)

    client.table.assert_called_once_with("tasks")
    query = client.table.return_value
    query.select.assert_called_once_with(TASK_LIST_COLUMNS)
    query.gte.assert_called_once_with("due_at", START.isoformat())
    query.lt.assert_called_once_with("due_at", END.isoformat())
    query.eq.assert_called_once_with("status", "pending")
    query.order.assert_called_once_with("due_at", desc=False)


async def test_mark_completed_updates_status_by_id() -> None:
    client = _chain_client()
    repo = TaskRepository(client)

    assert await repo.mark_completed("t1") is None

    query = client.table.return_value
    query.update.assert_called_once_with({"status": "completed"})
    query.eq.assert_called_once_with("id", "t1")


async def test_transport_error_becomes_store_error() -> None:
    client = _chain_client(error=httpx.ConnectError("connection refused"))
    repo = TaskRepository(client)

    with pytest.raises(StoreError, match="connection refused"):
        await repo.find_due_between(START, END)


async def test_create_returns_stored_task() -> None:
    repo = TaskRepository(FakeSupabaseClient())

    task = await repo.create(
        TaskCreate(
            related_id="app-1",
            type=TaskType.EMAIL,
            due_at=END,
            tenant_id="tenant",
            title="New email for Application app-1...",
        )
    )

    assert task.id
    assert task.status == TaskStatus.PENDING
    assert task.type == TaskType.EMAIL
    assert task.due_at == END


async def test_create_with_empty_response_is_store_error() -> None:
    repo = TaskRepository(_chain_client(data=[]))

    with pytest.raises(StoreError, match="Failed to create record"):
        await repo.create(
            TaskCreate(related_id="app-1", type=TaskType.CALL, due_at=END, tenant_id="tenant")
        )


def test_factory_reuses_task_repository() -> None:
    factory = RepositoryFactory(FakeSupabaseClient())
    assert factory.tasks is factory.tasks


async def test_incomplete_inserted_row_is_store_error() -> None:
    repo = TaskRepository(_chain_client(data=[{"id": "x"}]))

    with pytest.raises(StoreError, match="Unexpected tasks row"):
        await repo.create(
            TaskCreate(related_id="app-1", type=TaskType.CALL, due_at=END, tenant_id="tenant")
        )
