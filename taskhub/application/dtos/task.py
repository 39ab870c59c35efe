"""DTOs for task use cases (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TaskResult:
    """Task read-model (result of list_all and create)."""

    id: int
    name: str
    status: str
    created_at: datetime
