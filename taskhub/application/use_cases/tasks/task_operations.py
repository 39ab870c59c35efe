"""Task operations: list, create, update status, delete.

Each mutation runs one store statement and, once it has succeeded,
publishes exactly one change tag. Tags carry no data; clients re-fetch.
"""

from __future__ import annotations

import logging

from taskhub.application.dtos.task import TaskResult
from taskhub.application.interfaces.repositories import ITaskRepository
from taskhub.application.interfaces.services import IBroadcaster
from taskhub.domain.enums import TaskEvent
from taskhub.domain.exceptions import ResourceNotFoundException, ValidationException
from taskhub.shared.telemetry.tracing import add_span_attributes, traced

logger = logging.getLogger(__name__)


class TaskService:
    """CRUD over the tasks table with change notification.

    report_missing controls update/delete of an unknown id: False keeps the
    permissive behaviour (silent success, tag still published), True raises
    ResourceNotFoundException and publishes nothing.
    """

    def __init__(
        self,
        task_repo: ITaskRepository,
        broadcaster: IBroadcaster,
        *,
        report_missing: bool = False,
    ) -> None:
        self.task_repo = task_repo
        self.broadcaster = broadcaster
        self.report_missing = report_missing

    @traced("task.list")
    async def list_tasks(self) -> list[TaskResult]:
        """Return every task ordered by created_at descending."""
        tasks = await self.task_repo.list_all()
        add_span_attributes(**{"task.count": len(tasks)})
        return tasks

    @traced("task.create")
    async def create_task(self, name: str | None, status: str) -> TaskResult:
        """Insert a task and publish taskAdded.

        Raises:
            ValidationException: name is missing or blank.
        """
        if name is None or not name.strip():
            raise ValidationException("Task name is required", field="name")
        created = await self.task_repo.create(name=name, status=status)
        logger.info("Task created: id=%s status=%s", created.id, created.status)
        self.broadcaster.publish(TaskEvent.ADDED)
        return created

    @traced("task.update_status")
    async def update_task_status(self, task_id: int, status: str) -> None:
        """Replace the status of a task and publish taskUpdated."""
        affected = await self.task_repo.update_status(task_id=task_id, status=status)
        self._check_affected(affected, task_id)
        logger.info("Task status updated: id=%s status=%s rows=%d", task_id, status, affected)
        self.broadcaster.publish(TaskEvent.UPDATED)

    @traced("task.delete")
    async def delete_task(self, task_id: int) -> None:
        """Remove a task and publish taskDeleted."""
        affected = await self.task_repo.delete(task_id=task_id)
        self._check_affected(affected, task_id)
        logger.info("Task deleted: id=%s rows=%d", task_id, affected)
        self.broadcaster.publish(TaskEvent.DELETED)

    def _check_affected(self, affected: int, task_id: int) -> None:
        if affected == 0 and self.report_missing:
            raise ResourceNotFoundException("task", task_id)
