"""Selection cursor with wraparound navigation."""

from typing import Optional


class SelectionCursor:
    """Optional index of the highlighted task.

    The cursor does not own the store; callers pass the current store length.
    """

    def __init__(self, index: Optional[int] = None):
        self._index = index

    def current(self) -> Optional[int]:
        return self._index

    def advance(self, length: int) -> None:
        if length <= 0:
            return
        if self._index is None:
            self._index = 0
        else:
            self._index = (self._index + 1) % length

    def retreat(self, length: int) -> None:
        if length <= 0:
            return
        if self._index is None:
            self._index = 0
        else:
            self._index = (self._index - 1) % length

    def clear(self) -> None:
        self._index = None

    def clamp(self, length: int) -> None:
        """Pull the index back inside ``[0, length)``; clear on empty."""
        if self._index is None:
            return
        if length <= 0:
            self._index = None
        elif self._index >= length:
            self._index = length - 1


__all__ = ["SelectionCursor"]
