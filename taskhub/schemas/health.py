"""Health probe schemas."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """GET /health: the process is up."""

    status: Literal["ok"] = "ok"


class ReadinessResponse(BaseModel):
    """GET /health/ready when the store answers."""

    status: Literal["ok"] = "ok"
    database: str = Field(default="ok", description="Result of the store check")


class ReadinessErrorResponse(BaseModel):
    """GET /health/ready (503) when the store does not answer."""

    status: Literal["not_ready"] = "not_ready"
    database: str = Field(default="unreachable", description="Result of the store check")
    message: str
