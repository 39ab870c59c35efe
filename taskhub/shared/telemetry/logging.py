"""Logging setup: one stdout handler on the root logger.

Modules log through logging.getLogger(__name__).
"""

import logging
import sys

from taskhub.core.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Library loggers held at WARNING unless DEBUG is on. SQL echo is governed
# by DATABASE_ECHO, which sets the engine logger itself.
_QUIET_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "websockets", "httpx")


def setup_logging(settings: Settings | None = None) -> None:
    """Configure stdout logging at DEBUG (DEBUG=true) or INFO."""
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stdout)
    if not settings.debug:
        for name in _QUIET_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
