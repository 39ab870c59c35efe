"""ORM models. Import here so Base.metadata sees every table."""

from taskhub.infrastructure.persistence.models.task import Task

__all__ = ["Task"]
