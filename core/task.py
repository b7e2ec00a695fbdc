"""Task record and its timestamp codec."""

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


_FRACTION_RE = re.compile(r"\.(\d+)")


def encode_timestamp(value: datetime) -> str:
    """Encode a timezone-aware datetime as an RFC 3339 string in UTC."""
    if value.tzinfo is None:
        raise ValueError("timestamp must be timezone-aware")
    return value.astimezone(timezone.utc).isoformat()


def decode_timestamp(raw: str) -> datetime:
    """Parse an RFC 3339 string into a timezone-aware UTC datetime.

    Accepts a trailing ``Z`` and fractional seconds longer than microseconds
    (nanosecond precision is truncated). Naive timestamps are rejected.
    """
    if not isinstance(raw, str):
        raise ValueError(f"timestamp must be a string, got {type(raw).__name__}")
    text = raw.strip()
    if text[-1:] in ("Z", "z"):
        text = text[:-1] + "+00:00"
    text = _FRACTION_RE.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        raise ValueError(f"timestamp has no timezone: {raw!r}")
    return parsed.astimezone(timezone.utc)


@dataclass
class Task:
    """A single to-do item.

    ``created_at`` is fixed at creation. ``modified_at`` moves on every
    description edit, never on a completion toggle.
    """

    id: int
    description: str
    completed: bool
    created_at: datetime
    modified_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "description": self.description,
            "completed": self.completed,
            "created_at": encode_timestamp(self.created_at),
            "modified_at": encode_timestamp(self.modified_at),
        }


__all__ = ["Task", "utc_now", "encode_timestamp", "decode_timestamp"]
