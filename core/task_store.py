"""Ordered in-memory task collection with monotonic id allocation."""

from datetime import datetime
from typing import Callable, Iterable, List, Optional, Tuple

from .errors import IndexOutOfRange
from .task import Task, utc_now


class TaskStore:
    """Ordered sequence of tasks.

    New tasks are appended to the end; no other ordering is imposed. Ids come
    from a counter that only increases, so a removed task's id is never handed
    out again during the process lifetime.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self._tasks: List[Task] = []
        self._next_id: int = 1
        self._clock: Callable[[], datetime] = clock or utc_now

    @classmethod
    def from_tasks(cls, tasks: Iterable[Task], clock: Optional[Callable[[], datetime]] = None) -> "TaskStore":
        store = cls(clock=clock)
        store._tasks = list(tasks)
        if store._tasks:
            store._next_id = max(t.id for t in store._tasks) + 1
        return store

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self) -> int:
        return len(self._tasks)

    def tasks(self) -> Tuple[Task, ...]:
        return tuple(self._tasks)

    def _check(self, index: int) -> None:
        if not isinstance(index, int) or index < 0 or index >= len(self._tasks):
            raise IndexOutOfRange(index, len(self._tasks))

    def get(self, index: int) -> Task:
        self._check(index)
        return self._tasks[index]

    def append(self, description: str) -> Task:
        now = self._clock()
        task = Task(
            id=self._next_id,
            description=description,
            completed=False,
            created_at=now,
            modified_at=now,
        )
        self._next_id += 1
        self._tasks.append(task)
        return task

    def update_description(self, index: int, text: str) -> Task:
        self._check(index)
        task = self._tasks[index]
        task.description = text
        task.modified_at = self._clock()
        return task

    def toggle_completed(self, index: int) -> Task:
        self._check(index)
        task = self._tasks[index]
        task.completed = not task.completed
        return task

    def remove(self, index: int) -> Task:
        self._check(index)
        return self._tasks.pop(index)


__all__ = ["TaskStore"]
