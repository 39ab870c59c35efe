"""Errors raised by the task service.

No framework imports here; taskhub.core.exception_handlers turns these into
HTTP responses by error_code.
"""

from typing import Any


class TaskHubException(Exception):
    """Base for every error the service raises on purpose.

    Attributes:
        message: Text safe to show to the caller.
        error_code: Stable code used for the HTTP mapping (class name if omitted).
        details: Extra JSON-serializable context, e.g. the offending field.
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or type(self).__name__
        self.details = dict(details) if details else {}

    def to_dict(self) -> dict[str, Any]:
        """Error body: {"error", "message", "details"}."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(TaskHubException):
    """Input the service refuses, e.g. a blank task name."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, "VALIDATION_ERROR", {"field": field} if field else None)


class ResourceNotFoundException(TaskHubException):
    """An update or delete addressed an id with no row (only when reporting missing ids)."""

    def __init__(self, resource_type: str, resource_id: str | int) -> None:
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": str(resource_id)},
        )


class StoreException(TaskHubException):
    """The database rejected or failed a statement.

    The driver error is chained as __cause__ and logged; it is never sent to
    the caller.
    """

    def __init__(self, operation: str) -> None:
        super().__init__(
            f"Store operation failed: {operation}",
            "STORE_ERROR",
            {"operation": operation},
        )
