"""Repository interfaces (ports) for the application layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from taskhub.application.dtos.task import TaskResult


class ITaskRepository(Protocol):
    """Protocol for the tasks table.

    Every method is a single committed statement; failures surface as
    StoreException.
    """

    async def list_all(self) -> list[TaskResult]:
        """Return every task, newest first."""

    async def create(self, name: str, status: str) -> TaskResult:
        """Insert a task and return it with its store-assigned id."""

    async def update_status(self, task_id: int, status: str) -> int:
        """Replace the status of a task; return the number of rows affected."""

    async def delete(self, task_id: int) -> int:
        """Remove a task; return the number of rows affected."""
