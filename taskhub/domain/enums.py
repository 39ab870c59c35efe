"""Domain enumerations: task status and change-notification tags."""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class TaskStatus(_ValuesMixin, str, Enum):
    """Lifecycle status of a task."""

    PENDING = "pending"
    COMPLETED = "completed"


class TaskEvent(_ValuesMixin, str, Enum):
    """Tags sent on the notification channel after a successful mutation.

    Tags carry no payload: receivers re-fetch the full list.
    """

    ADDED = "taskAdded"
    UPDATED = "taskUpdated"
    DELETED = "taskDeleted"
