"""Messaging: Redis pub/sub relay for change tags across worker processes."""

from taskhub.infrastructure.messaging.redis_pubsub import (
    RedisBroadcaster,
    TaskEventPublisher,
    TaskEventRelay,
)

__all__ = [
    "RedisBroadcaster",
    "TaskEventPublisher",
    "TaskEventRelay",
]
