"""Task API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from taskhub.domain.enums import TaskStatus


class TaskCreateRequest(BaseModel):
    """Request body for POST /tasks."""

    name: str = Field(..., min_length=1, description="Task name (required, no length cap)")
    status: TaskStatus = Field(default=TaskStatus.PENDING, description="pending or completed")


class TaskStatusUpdate(BaseModel):
    """Request body for PUT /tasks/{id}. Replaces the status."""

    status: TaskStatus


class TaskCreatedResponse(BaseModel):
    """Response for POST /tasks: assigned id plus the submitted fields."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    status: str


class TaskResponse(BaseModel):
    """One element of GET /tasks."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    status: str
    created_at: datetime
