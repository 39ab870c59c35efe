"""WebSocket connection manager (notification hub).

Used by the /ws endpoint to register clients and by TaskService to fan out
change tags.
"""

from taskhub.api.websocket.manager import ConnectionManager

__all__ = ["ConnectionManager"]
