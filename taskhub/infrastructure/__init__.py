"""Infrastructure: persistence (SQLAlchemy) and messaging (Redis)."""
