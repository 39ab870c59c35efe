"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Used by main.py; no business
logic here, only wiring of infrastructure (database, WebSocket manager,
Redis relay, telemetry).
"""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from taskhub.api.websocket import ConnectionManager
from taskhub.core.config import Settings
from taskhub.infrastructure.persistence.database import Database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: database, WebSocket manager, broadcaster (Redis relay if
    enabled), store instrumentation (when create_app set up telemetry).
    Shutdown runs in reverse.
    """
    settings: Settings = app.state.settings

    # ---- Startup ----
    database = Database(settings)
    app.state.database = database
    manager = ConnectionManager()
    app.state.ws_manager = manager
    app.state.broadcaster = manager
    app.state.redis_relay_task = None
    publisher = None
    relay_client = None
    telemetry = getattr(app.state, "telemetry", None)

    try:
        if settings.database_auto_create:
            await database.create_all()

        if settings.redis_enabled:
            from taskhub.infrastructure.messaging.redis_pubsub import (
                RedisBroadcaster,
                TaskEventPublisher,
                TaskEventRelay,
                create_redis_client,
            )

            publisher = TaskEventPublisher(create_redis_client(settings))
            await publisher.connect()
            relay_client = create_redis_client(settings)
            relay = TaskEventRelay(manager, relay_client)
            app.state.broadcaster = RedisBroadcaster(publisher, manager, relay)
            app.state.redis_relay_task = asyncio.create_task(relay.run())

        if telemetry is not None:
            telemetry.instrument_engine(database.engine)

        logger.info("%s %s started", settings.app_name, settings.app_version)

        yield

    # ---- Shutdown (also after a failed startup) ----
    finally:
        await app.state.broadcaster.drain()
        await _stop_relay(app.state.redis_relay_task)

        if publisher is not None:
            try:
                await publisher.disconnect()
            except Exception:
                logger.exception("Redis publisher disconnect failed")
        if relay_client is not None:
            try:
                await relay_client.aclose()
            except Exception:
                logger.exception("Redis relay client close failed")

        if telemetry is not None:
            telemetry.shutdown()

        await database.dispose()
        logger.info("Database engine disposed")


async def _stop_relay(relay_task: asyncio.Task[None] | None) -> None:
    """Cancel the relay task and wait for it; a crashed relay is only logged."""
    if relay_task is None:
        return
    relay_task.cancel()
    try:
        await relay_task
    except asyncio.CancelledError:
        pass
    except Exception:
        logger.exception("Task event relay ended with an error")
    logger.info("Task event relay stopped")
