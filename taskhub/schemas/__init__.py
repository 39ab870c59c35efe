"""Pydantic request/response schemas for the HTTP API."""

from taskhub.schemas.health import HealthResponse, ReadinessErrorResponse, ReadinessResponse
from taskhub.schemas.task import (
    TaskCreatedResponse,
    TaskCreateRequest,
    TaskResponse,
    TaskStatusUpdate,
)
from taskhub.schemas.websocket import WebSocketStatusResponse

__all__ = [
    "HealthResponse",
    "ReadinessErrorResponse",
    "ReadinessResponse",
    "TaskCreateRequest",
    "TaskCreatedResponse",
    "TaskResponse",
    "TaskStatusUpdate",
    "WebSocketStatusResponse",
]
