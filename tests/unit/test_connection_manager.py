"""ConnectionManager: roster handling and best-effort broadcast."""

from taskhub.api.websocket import ConnectionManager
from taskhub.domain.enums import TaskEvent


class FakeWebSocket:
    """Minimal WebSocket double recording text frames."""

    def __init__(self, fail: bool = False) -> None:
        self.accepted = False
        self.sent: list[str] = []
        self.fail = fail

    async def accept(self) -> None:
        self.accepted = True

    async def send_text(self, data: str) -> None:
        if self.fail:
            raise RuntimeError("connection closed")
        self.sent.append(data)


async def test_connect_accepts_and_registers() -> None:
    """connect accepts the socket and counts it until disconnect."""
    manager = ConnectionManager()
    ws = FakeWebSocket()
    await manager.connect(ws)
    assert ws.accepted
    assert await manager.get_connection_count() == 1
    await manager.disconnect(ws)
    assert await manager.get_connection_count() == 0


async def test_broadcast_reaches_every_client() -> None:
    """Each connected socket receives the tag as a plain text frame."""
    manager = ConnectionManager()
    clients = [FakeWebSocket(), FakeWebSocket(), FakeWebSocket()]
    for ws in clients:
        await manager.connect(ws)
    delivered = await manager.broadcast(TaskEvent.ADDED)
    assert delivered == 3
    assert all(ws.sent == ["taskAdded"] for ws in clients)


async def test_broadcast_with_no_clients() -> None:
    """Broadcasting to an empty roster delivers nothing."""
    assert await ConnectionManager().broadcast(TaskEvent.DELETED) == 0


async def test_broadcast_drops_dead_sockets() -> None:
    """A failing socket does not stop delivery and is removed from the roster."""
    manager = ConnectionManager()
    alive, dead = FakeWebSocket(), FakeWebSocket(fail=True)
    await manager.connect(dead)
    await manager.connect(alive)
    delivered = await manager.broadcast(TaskEvent.UPDATED)
    assert delivered == 1
    assert alive.sent == ["taskUpdated"]
    assert await manager.get_connection_count() == 1


async def test_disconnect_unknown_socket_is_noop() -> None:
    """Removing a socket that never connected is ignored."""
    manager = ConnectionManager()
    await manager.disconnect(FakeWebSocket())
    assert await manager.get_connection_count() == 0


async def test_publish_schedules_broadcast() -> None:
    """publish() returns immediately; drain() waits for delivery."""
    manager = ConnectionManager()
    ws = FakeWebSocket()
    await manager.connect(ws)
    manager.publish(TaskEvent.ADDED)
    manager.publish(TaskEvent.DELETED)
    await manager.drain()
    assert ws.sent == ["taskAdded", "taskDeleted"]
