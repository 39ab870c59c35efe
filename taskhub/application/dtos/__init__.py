"""Application DTOs (no dependency on ORM)."""

from taskhub.application.dtos.task import TaskResult

__all__ = ["TaskResult"]
