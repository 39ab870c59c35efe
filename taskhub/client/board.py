"""Client-side task board: cached list, filter, and user notices.

The board never holds more than the last fetched list. Every change tag
from the channel triggers a full re-fetch; filtering is local only.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from taskhub.client.api_client import TaskApiClient, TaskApiError, TaskItem
from taskhub.domain.enums import TaskEvent, TaskStatus

logger = logging.getLogger(__name__)

FILTER_ALL = "all"


class ConnectionState(str, Enum):
    """State of the board's notification channel."""

    DISCONNECTED = "disconnected"
    CONNECTED = "connected"


@dataclass(frozen=True)
class Notice:
    """Transient user-facing message (a toast in the browser client)."""

    level: str
    message: str


class TaskBoard:
    """Local cache of tasks backed by a TaskApiClient."""

    def __init__(self, api: TaskApiClient) -> None:
        self.api = api
        self.tasks: list[TaskItem] = []
        self.notices: list[Notice] = []
        self.state = ConnectionState.DISCONNECTED

    async def refresh(self) -> None:
        """Re-fetch the full list. On failure the cache is left as it was."""
        try:
            self.tasks = await self.api.list_tasks()
        except TaskApiError as e:
            logger.error("Error fetching tasks: %s", e.message)

    async def add_task(self, name: str, status: str = TaskStatus.PENDING.value) -> None:
        """Create a task. An empty name is ignored without a request."""
        if not name:
            return
        try:
            await self.api.create_task(name, status)
        except TaskApiError as e:
            logger.error("Error adding task: %s", e.message)
            self._notify("error", "Error adding task!")
            return
        self._notify("success", "Task added successfully!")

    async def mark_completed(self, task_id: int) -> None:
        try:
            await self.api.update_status(task_id, TaskStatus.COMPLETED.value)
        except TaskApiError as e:
            logger.error("Error updating task status: %s", e.message)
            self._notify("error", "Error updating task status!")
            return
        self._notify("success", "Task status updated!")

    async def delete_task(self, task_id: int) -> None:
        try:
            await self.api.delete_task(task_id)
        except TaskApiError as e:
            logger.error("Error deleting task: %s", e.message)
            self._notify("error", "Error deleting task!")
            return
        self._notify("success", "Task deleted successfully!")

    def visible_tasks(self, status_filter: str = FILTER_ALL) -> list[TaskItem]:
        """Cached tasks matching status_filter ("all", "pending" or "completed")."""
        wanted = status_filter.lower()
        if wanted == FILTER_ALL:
            return list(self.tasks)
        return [t for t in self.tasks if t.status.lower() == wanted]

    async def handle_event(self, tag: str) -> None:
        """Refresh on a known change tag; anything else is ignored."""
        if tag not in TaskEvent.values():
            logger.debug("Ignoring unknown channel message: %r", tag)
            return
        await self.refresh()

    def _notify(self, level: str, message: str) -> None:
        self.notices.append(Notice(level=level, message=message))
