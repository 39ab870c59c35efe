"""Service interfaces (ports) for the application layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from taskhub.domain.enums import TaskEvent


class IBroadcaster(Protocol):
    """Fire-and-forget fan-out of change tags to connected clients."""

    def publish(self, event: TaskEvent) -> None:
        """Schedule delivery of the tag; must not block the caller."""
