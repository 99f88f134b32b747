"""TaskQueryService against the in-memory Supabase fake."""

from datetime import datetime, timedelta, timezone

import pytest

from app.exceptions import StoreError
from app.infra.supabase.repositories.tasks import TaskRepository
from app.models.task import TaskStatus
from app.services.task import TaskQueryService
from tests.fakes import FakeSupabaseClient

NOW = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)
START_OF_DAY = datetime(2025, 1, 15, 0, 0, tzinfo=timezone.utc)


def _row(task_id: str, due_at: datetime, status: str = "pending", task_type: str = "call") -> dict:
    return {
        "id": task_id,
        "title": f"Task {task_id}",
        "related_id": "app-0000-1111",
        "type": task_type,
        "due_at": due_at.isoformat(),
        "status": status,
        "tenant_id": "00000000-0000-0000-0000-000000000000",
    }


@pytest.fixture
def service(task_repo: TaskRepository) -> TaskQueryService:
    return TaskQueryService(task_repo, tz=timezone.utc)


async def test_fetch_returns_only_pending_tasks_inside_today(
    service: TaskQueryService, supabase_fake: FakeSupabaseClient
) -> None:
    supabase_fake.rows().extend([
        _row("late", START_OF_DAY + timedelta(hours=18)),
        _row("first", START_OF_DAY),
        _row("done", START_OF_DAY + timedelta(hours=9), status="completed"),
        _row("yesterday", START_OF_DAY - timedelta(seconds=1)),
        _row("tomorrow", START_OF_DAY + timedelta(days=1)),
        _row("mid", START_OF_DAY + timedelta(hours=9), task_type="review"),
    ])

    tasks = await service.fetch_tasks_due_today(now=NOW)

    assert [t.id for t in tasks] == ["first", "mid", "late"]
    assert all(t.status == TaskStatus.PENDING for t in tasks)
    assert [t.due_at for t in tasks] == sorted(t.due_at for t in tasks)


async def test_fetch_re_queries_on_every_call(
    service: TaskQueryService, supabase_fake: FakeSupabaseClient
) -> None:
    assert await service.fetch_tasks_due_today(now=NOW) == []
    supabase_fake.rows().append(_row("new", NOW))
    assert [t.id for t in await service.fetch_tasks_due_today(now=NOW)] == ["new"]


async def test_fetch_surfaces_store_message(
    service: TaskQueryService, supabase_fake: FakeSupabaseClient
) -> None:
    supabase_fake.fail("relation \"tasks\" does not exist")
    with pytest.raises(StoreError) as exc_info:
        await service.fetch_tasks_due_today(now=NOW)
    assert exc_info.value.message == "relation \"tasks\" does not exist"


async def test_mark_complete_removes_task_from_today(
    service: TaskQueryService, supabase_fake: FakeSupabaseClient
) -> None:
    supabase_fake.rows().append(_row("t1", NOW))

    await service.mark_task_complete("t1")

    assert supabase_fake.rows()[0]["status"] == "completed"
    assert await service.fetch_tasks_due_today(now=NOW) == []


async def test_mark_complete_twice_is_harmless(
    service: TaskQueryService, supabase_fake: FakeSupabaseClient
) -> None:
    supabase_fake.rows().append(_row("t1", NOW))

    await service.mark_task_complete("t1")
    await service.mark_task_complete("t1")

    assert supabase_fake.rows()[0]["status"] == "completed"


async def test_mark_complete_unknown_id_is_not_an_error(service: TaskQueryService) -> None:
    await service.mark_task_complete("missing")


async def test_mark_complete_surfaces_store_message(
    service: TaskQueryService, supabase_fake: FakeSupabaseClient
) -> None:
    supabase_fake.fail("permission denied for table tasks")
    with pytest.raises(StoreError, match="permission denied for table tasks"):
        await service.mark_task_complete("t1")
