"""Core: config, lifespan, and exception handler wiring."""

from taskhub.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
