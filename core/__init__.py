from .app_state import AppState
from .errors import HourglassError, IndexOutOfRange, PersistenceLoadError, PersistenceWriteError
from .input_buffer import InputBuffer
from .selection import SelectionCursor
from .task import Task, decode_timestamp, encode_timestamp, utc_now
from .task_store import TaskStore
from .view import View

__all__ = [
    "AppState",
    "Task",
    "TaskStore",
    "SelectionCursor",
    "InputBuffer",
    "View",
    "utc_now",
    "encode_timestamp",
    "decode_timestamp",
    # Errors
    "HourglassError",
    "IndexOutOfRange",
    "PersistenceLoadError",
    "PersistenceWriteError",
]
