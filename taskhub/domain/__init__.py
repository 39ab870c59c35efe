"""Domain layer: enums and exceptions (no framework imports)."""

from taskhub.domain.enums import TaskEvent, TaskStatus
from taskhub.domain.exceptions import (
    ResourceNotFoundException,
    StoreException,
    TaskHubException,
    ValidationException,
)

__all__ = [
    "ResourceNotFoundException",
    "StoreException",
    "TaskEvent",
    "TaskHubException",
    "TaskStatus",
    "ValidationException",
]
