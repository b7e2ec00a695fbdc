from enum import Enum


class View(Enum):
    """Interpretation context for incoming keys.

    ISSUES is reserved for a future issues screen. No transition enters it;
    while active every key is ignored.
    """

    BROWSING = "browsing"
    PENDING_ADD = "pending_add"
    PENDING_UPDATE = "pending_update"
    ISSUES = "issues"

    @property
    def is_text_entry(self) -> bool:
        return self in (View.PENDING_ADD, View.PENDING_UPDATE)


__all__ = ["View"]
