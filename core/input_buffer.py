"""Pending text for add/update commands."""


class InputBuffer:
    def __init__(self) -> None:
        self._chars: list[str] = []

    @property
    def text(self) -> str:
        return "".join(self._chars)

    def push_char(self, c: str) -> None:
        self._chars.append(c)

    def pop_char(self) -> None:
        if self._chars:
            self._chars.pop()

    def take(self) -> str:
        value = self.text
        self._chars.clear()
        return value

    def clear(self) -> None:
        self._chars.clear()

    def __len__(self) -> int:
        return len(self._chars)


__all__ = ["InputBuffer"]
