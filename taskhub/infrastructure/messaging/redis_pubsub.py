"""Redis Pub/Sub for change tags.

With several worker processes each one only knows its own WebSocket
clients. Mutations publish the tag to one Redis channel and every process
runs a TaskEventRelay, which forwards each tag to its local
ConnectionManager.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

import redis.asyncio as redis

from taskhub.core.config import Settings
from taskhub.domain.enums import TaskEvent

if TYPE_CHECKING:
    from taskhub.api.websocket.manager import ConnectionManager

logger = logging.getLogger(__name__)

CHANNEL = "task_events"


def create_redis_client(settings: Settings) -> redis.Redis:
    """Build an asyncio Redis client from settings (no I/O yet)."""
    return redis.Redis(
        host=settings.redis_host,
        port=settings.redis_port,
        db=settings.redis_db,
        password=settings.redis_password.get_secret_value() if settings.redis_password else None,
        decode_responses=True,
        socket_connect_timeout=5,
    )


class TaskEventPublisher:
    """Publishes change tags to the shared Redis channel."""

    def __init__(self, redis_client: redis.Redis) -> None:
        """Initialize. Pass redis_client for DI/testing."""
        self.redis = redis_client
        self._connected = False

    async def connect(self) -> None:
        """Verify the connection. Call on app startup."""
        try:
            await self.redis.ping()
            self._connected = True
            logger.info("Redis pub/sub connected")
        except (redis.ConnectionError, redis.TimeoutError) as e:
            logger.warning("Redis pub/sub connection failed: %s", e)
            self._connected = False

    async def disconnect(self) -> None:
        """Close the Redis connection. Call on app shutdown."""
        await self.redis.aclose()
        self._connected = False
        logger.info("Redis pub/sub disconnected")

    def is_available(self) -> bool:
        """True once connect() succeeded."""
        return self._connected

    async def publish(self, event: TaskEvent) -> bool:
        """Publish a tag.

        Returns:
            True if published, False if Redis is unavailable or the call failed.
        """
        if not self.is_available():
            return False
        try:
            await self.redis.publish(CHANNEL, event.value)
            logger.debug("Published %s to %s", event.value, CHANNEL)
        except Exception:
            logger.exception("Failed to publish change tag")
            return False
        else:
            return True


class TaskEventRelay:
    """Forwards tags from the Redis channel to this process's sockets.

    run() keeps a subscription open until cancelled. A lost connection is
    logged and the subscription is retried with exponential backoff
    (retry_delay doubling up to max_retry_delay). subscribed is True only
    while a subscription is live.
    """

    def __init__(
        self,
        manager: ConnectionManager,
        redis_client: redis.Redis,
        *,
        retry_delay: float = 1.0,
        max_retry_delay: float = 30.0,
    ) -> None:
        self.manager = manager
        self.redis = redis_client
        self.retry_delay = retry_delay
        self.max_retry_delay = max_retry_delay
        self.subscribed = False
        self._known = set(TaskEvent.values())

    async def run(self) -> None:
        """Subscribe and relay until cancelled."""
        delay = self.retry_delay
        while True:
            pubsub = self.redis.pubsub()
            try:
                await pubsub.subscribe(CHANNEL)
                self.subscribed = True
                delay = self.retry_delay
                logger.info("Subscribed to %s for WebSocket broadcast", CHANNEL)
                async for message in pubsub.listen():
                    await self._forward(message)
                logger.warning("Subscription to %s ended", CHANNEL)
            except asyncio.CancelledError:
                logger.info("Task event relay cancelled")
                raise
            except Exception:
                logger.exception("Task event relay error, retrying in %.1fs", delay)
            finally:
                self.subscribed = False
                await self._close(pubsub)
            await asyncio.sleep(delay)
            delay = min(delay * 2, self.max_retry_delay)

    async def _forward(self, message: dict) -> None:
        if message["type"] != "message":
            return
        data = message.get("data")
        tag = data.decode() if isinstance(data, bytes) else data
        if tag not in self._known:
            logger.warning("Ignoring unknown tag on %s: %r", CHANNEL, tag)
            return
        await self.manager.broadcast(tag)

    async def _close(self, pubsub: redis.client.PubSub) -> None:
        # The connection may already be dead.
        try:
            await pubsub.unsubscribe(CHANNEL)
            await pubsub.aclose()
        except Exception as e:
            logger.debug("Closing pub/sub after relay stop failed: %s", e)


class RedisBroadcaster:
    """IBroadcaster that routes tags through Redis.

    Tags go to the local manager instead when Redis rejects the publish or,
    given a relay, while that relay is not subscribed (its own process would
    otherwise never see the tag).
    """

    def __init__(
        self,
        publisher: TaskEventPublisher,
        manager: ConnectionManager,
        relay: TaskEventRelay | None = None,
    ) -> None:
        self.publisher = publisher
        self.manager = manager
        self.relay = relay
        self._pending: set[asyncio.Task[None]] = set()

    def publish(self, event: TaskEvent) -> None:
        """Schedule the Redis publish without waiting for it."""
        task = asyncio.get_running_loop().create_task(self._publish(event))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _publish(self, event: TaskEvent) -> None:
        if self.relay is not None and not self.relay.subscribed:
            logger.warning("Relay not subscribed, broadcasting %s locally", event.value)
            await self.manager.broadcast(event)
            return
        if not await self.publisher.publish(event):
            logger.warning("Redis unavailable, broadcasting %s locally", event.value)
            await self.manager.broadcast(event)

    async def drain(self) -> None:
        """Wait for every scheduled publish to finish."""
        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)
