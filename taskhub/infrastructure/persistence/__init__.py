"""Persistence: async engine wrapper, ORM models, repositories, migrations."""

from taskhub.infrastructure.persistence.database import Base, Database

__all__ = ["Base", "Database"]
