"""Notification channel schemas."""

from pydantic import BaseModel


class WebSocketStatusResponse(BaseModel):
    """GET /ws/status: clients currently subscribed to /ws."""

    total_connections: int
