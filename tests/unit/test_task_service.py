"""TaskService unit tests with an in-memory repository."""

from datetime import datetime, timedelta, timezone

import pytest

from taskhub.application.dtos.task import TaskResult
from taskhub.application.use_cases.tasks import TaskService
from taskhub.domain.enums import TaskEvent
from taskhub.domain.exceptions import (
    ResourceNotFoundException,
    StoreException,
    ValidationException,
)
from tests.conftest import RecordingBroadcaster


class InMemoryTaskRepository:
    """ITaskRepository over a dict; optionally fails every call."""

    def __init__(self, fail: bool = False) -> None:
        self.rows: dict[int, TaskResult] = {}
        self.fail = fail
        self._next_id = 1
        self._clock = datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc)

    def _check(self, operation: str) -> None:
        if self.fail:
            raise StoreException(operation)

    async def list_all(self) -> list[TaskResult]:
        self._check("list")
        return sorted(self.rows.values(), key=lambda t: (t.created_at, t.id), reverse=True)

    async def create(self, name: str, status: str) -> TaskResult:
        self._check("create")
        self._clock += timedelta(seconds=1)
        task = TaskResult(id=self._next_id, name=name, status=status, created_at=self._clock)
        self.rows[task.id] = task
        self._next_id += 1
        return task

    async def update_status(self, task_id: int, status: str) -> int:
        self._check("update_status")
        task = self.rows.get(task_id)
        if task is None:
            return 0
        self.rows[task_id] = TaskResult(task.id, task.name, status, task.created_at)
        return 1

    async def delete(self, task_id: int) -> int:
        self._check("delete")
        return 1 if self.rows.pop(task_id, None) else 0


@pytest.fixture
def repo() -> InMemoryTaskRepository:
    return InMemoryTaskRepository()


@pytest.fixture
def broadcaster() -> RecordingBroadcaster:
    return RecordingBroadcaster()


@pytest.fixture
def service(repo: InMemoryTaskRepository, broadcaster: RecordingBroadcaster) -> TaskService:
    return TaskService(repo, broadcaster)


async def test_create_task_publishes_added(
    service: TaskService, broadcaster: RecordingBroadcaster
) -> None:
    """create_task returns the stored task and publishes taskAdded once."""
    created = await service.create_task(name="Buy milk", status="pending")
    assert created.id == 1
    assert created.name == "Buy milk"
    assert created.status == "pending"
    assert broadcaster.events == [TaskEvent.ADDED]


@pytest.mark.parametrize("name", [None, "", "   "])
async def test_create_task_rejects_missing_name(
    service: TaskService,
    repo: InMemoryTaskRepository,
    broadcaster: RecordingBroadcaster,
    name: str | None,
) -> None:
    """Missing or blank names raise ValidationException before touching the store."""
    with pytest.raises(ValidationException) as exc_info:
        await service.create_task(name=name, status="pending")
    assert exc_info.value.details == {"field": "name"}
    assert repo.rows == {}
    assert broadcaster.events == []


async def test_list_tasks_is_read_only(
    service: TaskService, broadcaster: RecordingBroadcaster
) -> None:
    """list_tasks returns newest first and publishes nothing."""
    await service.create_task(name="a", status="pending")
    await service.create_task(name="b", status="completed")
    broadcaster.events.clear()

    tasks = await service.list_tasks()
    assert [t.name for t in tasks] == ["b", "a"]
    assert broadcaster.events == []


async def test_update_and_delete_publish_tags(
    service: TaskService, repo: InMemoryTaskRepository, broadcaster: RecordingBroadcaster
) -> None:
    """Each successful mutation publishes exactly one tag."""
    created = await service.create_task(name="a", status="pending")
    await service.update_task_status(task_id=created.id, status="completed")
    assert repo.rows[created.id].status == "completed"
    await service.delete_task(task_id=created.id)
    assert repo.rows == {}
    assert broadcaster.events == [TaskEvent.ADDED, TaskEvent.UPDATED, TaskEvent.DELETED]


async def test_unknown_id_is_silent_by_default(
    service: TaskService, broadcaster: RecordingBroadcaster
) -> None:
    """Without report_missing, unknown ids succeed and still publish."""
    await service.update_task_status(task_id=99, status="completed")
    await service.delete_task(task_id=99)
    assert broadcaster.events == [TaskEvent.UPDATED, TaskEvent.DELETED]


async def test_unknown_id_raises_when_report_missing(
    repo: InMemoryTaskRepository, broadcaster: RecordingBroadcaster
) -> None:
    """With report_missing, unknown ids raise and publish nothing."""
    service = TaskService(repo, broadcaster, report_missing=True)
    with pytest.raises(ResourceNotFoundException) as exc_info:
        await service.update_task_status(task_id=7, status="completed")
    assert exc_info.value.details == {"resource_type": "task", "resource_id": "7"}
    with pytest.raises(ResourceNotFoundException):
        await service.delete_task(task_id=7)
    assert broadcaster.events == []


async def test_store_failure_publishes_nothing(broadcaster: RecordingBroadcaster) -> None:
    """StoreException propagates and no tag is published."""
    service = TaskService(InMemoryTaskRepository(fail=True), broadcaster)
    with pytest.raises(StoreException):
        await service.create_task(name="a", status="pending")
    with pytest.raises(StoreException):
        await service.update_task_status(task_id=1, status="completed")
    with pytest.raises(StoreException):
        await service.delete_task(task_id=1)
    with pytest.raises(StoreException):
        await service.list_tasks()
    assert broadcaster.events == []
