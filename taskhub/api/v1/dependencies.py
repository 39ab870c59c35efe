"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions and the task use case. The
database and broadcaster are read from app.state (set in lifespan), so
routes never reach for module-level singletons.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from taskhub.application.interfaces.services import IBroadcaster
from taskhub.application.use_cases.tasks import TaskService
from taskhub.core.config import Settings
from taskhub.infrastructure.persistence.database import Database
from taskhub.infrastructure.persistence.repositories import TaskRepository


def get_app_settings(request: Request) -> Settings:
    """Settings the app was created with."""
    return request.app.state.settings


def get_database(request: Request) -> Database:
    """Database built in lifespan."""
    return request.app.state.database


def get_broadcaster(request: Request) -> IBroadcaster:
    """Broadcaster built in lifespan (local manager or Redis relay)."""
    return request.app.state.broadcaster


async def get_db(
    database: Annotated[Database, Depends(get_database)],
) -> AsyncIterator[AsyncSession]:
    """Database session dependency. Repositories commit per statement."""
    async with database.session() as session:
        yield session


async def get_task_service(
    db: Annotated[AsyncSession, Depends(get_db)],
    broadcaster: Annotated[IBroadcaster, Depends(get_broadcaster)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> TaskService:
    """Build TaskService for the request's session."""
    return TaskService(
        TaskRepository(db),
        broadcaster,
        report_missing=settings.report_missing_tasks,
    )
