"""Task ORM model. Table: tasks."""

from datetime import datetime

from sqlalchemy import DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from taskhub.infrastructure.persistence.database import Base
from taskhub.shared.utils.datetime import utc_now


class Task(Base):
    """A to-do item. name and created_at never change after insert."""

    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(String(32), nullable=False)
    # Set in Python as well: SQLite CURRENT_TIMESTAMP has second resolution.
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        server_default=func.now(),
        nullable=False,
    )

    __table_args__ = (Index("ix_tasks_created_at", "created_at"),)

    def __repr__(self) -> str:
        return f"<Task {self.id} {self.status}>"
