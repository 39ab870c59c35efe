"""Notification channel listener for the Python client."""

from __future__ import annotations

import logging

import websockets
from websockets.exceptions import WebSocketException

from taskhub.client.board import ConnectionState, TaskBoard

logger = logging.getLogger(__name__)


class ChannelListener:
    """Subscribes a TaskBoard to the server's /ws channel.

    The board is Connected between handshake and loss of the socket.
    Reconnecting is left to the caller.
    """

    def __init__(self, ws_url: str, board: TaskBoard) -> None:
        self.ws_url = ws_url
        self.board = board

    async def run(self) -> None:
        """Connect, feed every text frame to the board, return on close."""
        try:
            async with websockets.connect(self.ws_url) as ws:
                self.board.state = ConnectionState.CONNECTED
                logger.info("Connected to %s", self.ws_url)
                await self.board.refresh()
                async for message in ws:
                    if isinstance(message, bytes):
                        message = message.decode("utf-8", errors="replace")
                    await self.board.handle_event(message)
        except (OSError, WebSocketException) as e:
            logger.warning("Channel connection lost: %s", e)
        finally:
            self.board.state = ConnectionState.DISCONNECTED
