"""Pytest configuration and fixtures.

HTTP tests run against app.main:app through httpx's ASGI transport, with the
Supabase client and the realtime publisher replaced by in-memory fakes.
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app import config
from app.api.dependencies import get_event_publisher
from app.infra.supabase import get_supabase_client
from app.infra.supabase.repositories.tasks import TaskRepository
from app.main import app

from tests.fakes import FakePublisher, FakeSupabaseClient


@pytest.fixture
def supabase_fake() -> FakeSupabaseClient:
    return FakeSupabaseClient()


@pytest.fixture
def publisher() -> FakePublisher:
    return FakePublisher()


@pytest.fixture
def task_repo(supabase_fake: FakeSupabaseClient) -> TaskRepository:
    return TaskRepository(supabase_fake)


@pytest.fixture
def utc_app_timezone(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pin the dashboard's notion of "today" to UTC."""
    monkeypatch.setattr(config, "APP_TIMEZONE", "UTC")


@pytest.fixture
async def client(supabase_fake: FakeSupabaseClient, publisher: FakePublisher, utc_app_timezone) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI) with faked collaborators."""
    app.dependency_overrides[get_supabase_client] = lambda: supabase_fake
    app.dependency_overrides[get_event_publisher] = lambda: publisher
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()
