"""Async HTTP wrapper around the task API."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

import httpx

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TaskApiError(Exception):
    """Any non-2xx response, transport failure or unreadable body from the task API."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


@dataclass(frozen=True)
class TaskItem:
    """One task as returned by GET /tasks."""

    id: int
    name: str
    status: str
    created_at: str | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> TaskItem:
        return cls(
            id=int(data["id"]),
            name=data["name"],
            status=data["status"],
            created_at=data.get("created_at"),
        )


class TaskApiClient:
    """Thin httpx client for /tasks.

    Pass transport to route requests somewhere other than the network
    (e.g. httpx.ASGITransport or httpx.MockTransport in tests).
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> TaskApiClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def list_tasks(self) -> list[TaskItem]:
        """GET /tasks (newest first)."""
        resp = await self._request("GET", "/tasks")
        return _decode(resp, lambda body: [TaskItem.from_json(item) for item in body])

    async def create_task(self, name: str, status: str = "pending") -> TaskItem:
        """POST /tasks and return the created task."""
        resp = await self._request("POST", "/tasks", json={"name": name, "status": status})
        return _decode(resp, TaskItem.from_json)

    async def update_status(self, task_id: int, status: str) -> None:
        """PUT /tasks/{task_id} with the new status."""
        await self._request("PUT", f"/tasks/{task_id}", json={"status": status})

    async def delete_task(self, task_id: int) -> None:
        """DELETE /tasks/{task_id}."""
        await self._request("DELETE", f"/tasks/{task_id}")

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            resp = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise TaskApiError(f"{method} {path} failed: {e}") from e
        if resp.is_error:
            raise TaskApiError(
                f"{method} {path} returned {resp.status_code}",
                status_code=resp.status_code,
            )
        return resp


def _decode(resp: httpx.Response, parse: Callable[[Any], T]) -> T:
    """Parse a 2xx body, raising TaskApiError when it is not the expected JSON."""
    try:
        return parse(resp.json())
    except (ValueError, KeyError, TypeError) as e:
        request = resp.request
        raise TaskApiError(
            f"{request.method} {request.url.path} returned an unreadable body: {e}",
            status_code=resp.status_code,
        ) from e
