"""Task use cases."""

from taskhub.application.use_cases.tasks.task_operations import TaskService

__all__ = ["TaskService"]
