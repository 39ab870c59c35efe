"""SQLAlchemy repositories implementing application ports."""

from taskhub.infrastructure.persistence.repositories.task_repo import TaskRepository

__all__ = ["TaskRepository"]
