"""Pytest configuration and fixtures for taskhub.

Every test app gets its own SQLite file under tmp_path, so tests never
share rows. The async client drives the ASGI app directly; the lifespan
is entered explicitly because httpx's ASGITransport does not run it.
"""

from collections.abc import AsyncIterator, Iterator
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from taskhub.core.config import Settings
from taskhub.domain.enums import TaskEvent
from taskhub.main import create_app


class RecordingBroadcaster:
    """IBroadcaster stand-in that records every published tag."""

    def __init__(self) -> None:
        self.events: list[TaskEvent] = []

    def publish(self, event: TaskEvent) -> None:
        self.events.append(event)

    async def drain(self) -> None:
        return None


def make_settings(tmp_path: Path, **overrides) -> Settings:
    """Settings for a throwaway SQLite database; .env is ignored."""
    values = {
        "database_url": f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        "telemetry_enabled": False,
        "redis_enabled": False,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Default test settings (permissive update/delete of unknown ids)."""
    return make_settings(tmp_path)


@pytest.fixture
async def app(settings: Settings) -> AsyncIterator[FastAPI]:
    """App with its lifespan running (database created, manager on state)."""
    application = create_app(settings)
    async with application.router.lifespan_context(application):
        yield application


@pytest.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def recorder(app: FastAPI) -> RecordingBroadcaster:
    """Swap the app's broadcaster for one that records tags."""
    broadcaster = RecordingBroadcaster()
    app.state.broadcaster = broadcaster
    return broadcaster


@pytest.fixture
def sync_client(settings: Settings) -> Iterator[TestClient]:
    """Starlette TestClient (runs the lifespan); needed for WebSocket tests."""
    with TestClient(create_app(settings)) as tc:
        yield tc
