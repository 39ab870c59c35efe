"""Request ID middleware (raw ASGI).

Every HTTP response carries a request id header: the caller's own value when
it is a short token of letters, digits, '-' or '_', otherwise a fresh UUID4.
The id is also stored on request.state.request_id. WebSocket and lifespan
scopes pass through untouched.
"""

import re
import uuid

from starlette.datastructures import Headers, MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

REQUEST_ID_MAX_LENGTH = 64
_REQUEST_ID_PATTERN = re.compile(rf"^[A-Za-z0-9_-]{{1,{REQUEST_ID_MAX_LENGTH}}}$")


def sanitize_request_id(raw: str | None) -> str:
    """Return raw (stripped) if it is a safe token, else a new UUID4 string."""
    candidate = (raw or "").strip()
    if _REQUEST_ID_PATTERN.match(candidate):
        return candidate
    return str(uuid.uuid4())


class RequestIDMiddleware:
    """Adds or forwards the request id header on each HTTP request."""

    def __init__(self, app: ASGIApp, header_name: str = "X-Request-ID") -> None:
        self.app = app
        self.header_name = header_name

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_id = sanitize_request_id(Headers(scope=scope).get(self.header_name))
        scope.setdefault("state", {})["request_id"] = request_id

        async def send_with_request_id(message: Message) -> None:
            if message["type"] == "http.response.start":
                MutableHeaders(scope=message)[self.header_name] = request_id
            await send(message)

        await self.app(scope, receive, send_with_request_id)
