"""Error taxonomy for hourglass."""

from pathlib import Path
from typing import Optional, Union


class HourglassError(Exception):
    """Base class for all hourglass errors."""


class PersistenceLoadError(HourglassError):
    """Backing file exists but cannot be read or parsed. Fatal at startup."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot load tasks from {self.path}: {reason}")


class PersistenceWriteError(HourglassError):
    """Backing file cannot be written after a mutation."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot save tasks to {self.path}: {reason}")


class IndexOutOfRange(HourglassError, IndexError):
    def __init__(self, index: Optional[int], length: int):
        self.index = index
        self.length = length
        super().__init__(f"Task index {index} out of range (store has {length} tasks)")


__all__ = ["HourglassError", "PersistenceLoadError", "PersistenceWriteError", "IndexOutOfRange"]
