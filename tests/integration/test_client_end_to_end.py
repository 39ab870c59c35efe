"""Python client driving the real app over ASGI."""

from fastapi import FastAPI
from httpx import ASGITransport

from taskhub.client import TaskApiClient, TaskBoard


async def test_board_round_trip(app: FastAPI) -> None:
    """Add, complete and delete through TaskBoard; refresh reflects each step."""
    api = TaskApiClient("http://test", transport=ASGITransport(app=app))
    board = TaskBoard(api)
    try:
        await board.add_task("Buy milk", "pending")
        await board.handle_event("taskAdded")
        assert [(t.name, t.status) for t in board.tasks] == [("Buy milk", "pending")]
        task_id = board.tasks[0].id

        await board.mark_completed(task_id)
        await board.handle_event("taskUpdated")
        assert [t.name for t in board.visible_tasks("completed")] == ["Buy milk"]
        assert board.visible_tasks("pending") == []

        await board.delete_task(task_id)
        await board.handle_event("taskDeleted")
        assert board.tasks == []
        assert [n.level for n in board.notices] == ["success", "success", "success"]
    finally:
        await api.aclose()


async def test_board_reports_validation_failure(app: FastAPI) -> None:
    """A rejected create yields an error notice and no row."""
    async with TaskApiClient("http://test", transport=ASGITransport(app=app)) as api:
        board = TaskBoard(api)
        await board.add_task("   ")
        await board.refresh()
    assert board.notices[-1].level == "error"
    assert board.tasks == []
