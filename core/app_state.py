"""Application state aggregate threaded through dispatch and render."""

import time
from dataclasses import dataclass, field
from typing import Optional

from .input_buffer import InputBuffer
from .selection import SelectionCursor
from .task import Task
from .task_store import TaskStore
from .view import View


@dataclass
class AppState:
    store: TaskStore = field(default_factory=TaskStore)
    cursor: SelectionCursor = field(default_factory=SelectionCursor)
    input_buffer: InputBuffer = field(default_factory=InputBuffer)
    view: View = View.BROWSING
    should_quit: bool = False
    status_message: str = ""
    status_message_expires: float = 0.0

    def selected_task(self) -> Optional[Task]:
        index = self.cursor.current()
        if index is None or index >= len(self.store):
            return None
        return self.store.get(index)

    def set_status_message(self, message: str, ttl: float = 4.0) -> None:
        self.status_message = message
        self.status_message_expires = time.time() + ttl

    def active_status_message(self, now: Optional[float] = None) -> str:
        ts = now if now is not None else time.time()
        if self.status_message and ts < self.status_message_expires:
            return self.status_message
        return ""


__all__ = ["AppState"]
