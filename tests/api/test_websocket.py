"""Notification channel tests: /ws receives a tag after each mutation."""

import time

import pytest
from fastapi.testclient import TestClient


def _wait_for_connections(tc: TestClient, expected: int) -> None:
    """Block until the manager has registered expected sockets."""
    deadline = time.monotonic() + 5
    while time.monotonic() < deadline:
        if tc.get("/ws/status").json()["total_connections"] == expected:
            return
        time.sleep(0.01)
    pytest.fail(f"expected {expected} WebSocket connection(s)")


def test_ws_status_counts_connections(sync_client: TestClient) -> None:
    """GET /ws/status reflects connects and disconnects."""
    assert sync_client.get("/ws/status").json() == {"total_connections": 0}
    with sync_client.websocket_connect("/ws"):
        _wait_for_connections(sync_client, 1)
    _wait_for_connections(sync_client, 0)


def test_mutations_broadcast_tags_in_order(sync_client: TestClient) -> None:
    """A connected client receives taskAdded, taskUpdated, taskDeleted as plain text."""
    with sync_client.websocket_connect("/ws") as ws:
        _wait_for_connections(sync_client, 1)

        task_id = sync_client.post("/tasks", json={"name": "Buy milk"}).json()["id"]
        assert ws.receive_text() == "taskAdded"

        sync_client.put(f"/tasks/{task_id}", json={"status": "completed"})
        assert ws.receive_text() == "taskUpdated"

        sync_client.delete(f"/tasks/{task_id}")
        assert ws.receive_text() == "taskDeleted"


def test_every_client_receives_each_tag(sync_client: TestClient) -> None:
    """Two connected clients both get the tag for one create."""
    with sync_client.websocket_connect("/ws") as first, sync_client.websocket_connect(
        "/ws"
    ) as second:
        _wait_for_connections(sync_client, 2)
        sync_client.post("/tasks", json={"name": "shared"})
        assert first.receive_text() == "taskAdded"
        assert second.receive_text() == "taskAdded"


def test_client_messages_are_ignored(sync_client: TestClient) -> None:
    """Text sent by a client does not disturb the channel."""
    with sync_client.websocket_connect("/ws") as ws:
        _wait_for_connections(sync_client, 1)
        ws.send_text("hello")
        sync_client.post("/tasks", json={"name": "after hello"})
        assert ws.receive_text() == "taskAdded"
