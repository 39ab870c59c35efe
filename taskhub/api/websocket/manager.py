"""WebSocket connection manager.

Holds every active connection on a single global topic and fans change
tags out to all of them. Use via app.state.ws_manager (set in lifespan).
"""

from __future__ import annotations

import asyncio
import logging

from fastapi import WebSocket

from taskhub.domain.enums import TaskEvent

logger = logging.getLogger(__name__)


class ConnectionManager:
    """Manages WebSocket connections and best-effort broadcast.

    - Delivery is at most once per broadcast: no ack, no replay, and sockets
      that fail a send are dropped from the roster.
    - publish() schedules broadcast() on the running loop so the caller (an
      HTTP request) returns without waiting for delivery.
    - The roster is lock-protected for concurrent access.
    """

    def __init__(self) -> None:
        """Initialize with an empty roster."""
        self._connections: set[WebSocket] = set()
        self._lock = asyncio.Lock()
        self._pending: set[asyncio.Task[int]] = set()

    async def connect(self, websocket: WebSocket) -> None:
        """Accept and register a new connection.

        Args:
            websocket: The WebSocket instance to accept and track.
        """
        await websocket.accept()
        async with self._lock:
            self._connections.add(websocket)
            total = len(self._connections)
        logger.info("Client connected (%d active)", total)

    async def disconnect(self, websocket: WebSocket) -> None:
        """Remove a connection (call on disconnect).

        Args:
            websocket: The WebSocket instance to remove.
        """
        async with self._lock:
            self._connections.discard(websocket)
            total = len(self._connections)
        logger.info("Client disconnected (%d active)", total)

    async def broadcast(self, message: str | TaskEvent) -> int:
        """Send a text frame to every connected client.

        Args:
            message: Event tag (or any text) to send.

        Returns:
            Number of clients the frame was written to.
        """
        text = message.value if isinstance(message, TaskEvent) else message
        async with self._lock:
            snapshot = list(self._connections)
        dead: list[WebSocket] = []
        for ws in snapshot:
            try:
                await ws.send_text(text)
            except Exception:
                dead.append(ws)
        if dead:
            logger.debug("Dropping %d unreachable connection(s)", len(dead))
            async with self._lock:
                for ws in dead:
                    self._connections.discard(ws)
        return len(snapshot) - len(dead)

    def publish(self, event: TaskEvent) -> None:
        """Schedule a broadcast of event without waiting for delivery.

        Must be called from code running on the event loop.
        """
        task = asyncio.get_running_loop().create_task(self.broadcast(event))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def drain(self) -> None:
        """Wait for every scheduled broadcast to finish."""
        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def get_connection_count(self) -> int:
        """Return the number of active connections (lock-safe)."""
        async with self._lock:
            return len(self._connections)
