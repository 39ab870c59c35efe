"""Task repository. Each method is one statement, committed on its own."""

from __future__ import annotations

import logging

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from taskhub.application.dtos.task import TaskResult
from taskhub.domain.exceptions import StoreException
from taskhub.infrastructure.persistence.models.task import Task
from taskhub.shared.utils.datetime import ensure_utc

logger = logging.getLogger(__name__)


def _to_result(t: Task) -> TaskResult:
    """Map Task ORM to TaskResult DTO."""
    return TaskResult(
        id=t.id,
        name=t.name,
        status=t.status,
        created_at=ensure_utc(t.created_at),
    )


class TaskRepository:
    """Task repository. Implements ITaskRepository.

    SQLAlchemy errors are rolled back, logged, and re-raised as
    StoreException so callers never see driver details.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_all(self) -> list[TaskResult]:
        """Return every task, newest first (id breaks created_at ties)."""
        try:
            result = await self.db.execute(
                select(Task).order_by(Task.created_at.desc(), Task.id.desc())
            )
        except SQLAlchemyError as e:
            raise await self._store_error("list", e) from e
        return [_to_result(t) for t in result.scalars().all()]

    async def create(self, name: str, status: str) -> TaskResult:
        """Insert a task and return it with its store-assigned id."""
        task = Task(name=name, status=status)
        try:
            self.db.add(task)
            await self.db.flush()
            await self.db.refresh(task)
            await self.db.commit()
        except SQLAlchemyError as e:
            raise await self._store_error("create", e) from e
        return _to_result(task)

    async def update_status(self, task_id: int, status: str) -> int:
        """Replace the status of a task; return rows affected (0 or 1)."""
        try:
            result = await self.db.execute(
                update(Task).where(Task.id == task_id).values(status=status)
            )
            await self.db.commit()
        except SQLAlchemyError as e:
            raise await self._store_error("update_status", e) from e
        return result.rowcount or 0

    async def delete(self, task_id: int) -> int:
        """Remove a task; return rows affected (0 or 1)."""
        try:
            result = await self.db.execute(delete(Task).where(Task.id == task_id))
            await self.db.commit()
        except SQLAlchemyError as e:
            raise await self._store_error("delete", e) from e
        return result.rowcount or 0

    async def _store_error(self, operation: str, exc: SQLAlchemyError) -> StoreException:
        logger.error("Task store %s failed: %s", operation, exc, exc_info=True)
        await self.db.rollback()
        return StoreException(operation)
