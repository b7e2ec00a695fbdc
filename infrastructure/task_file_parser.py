import json
from typing import Any, Dict, List, Sequence

from core import Task, decode_timestamp


class TaskFormatError(ValueError):
    """Backing file content does not describe a valid task list."""


class TaskFileParser:
    """JSON codec for the backing file: a top-level array of task records."""

    REQUIRED_FIELDS = ("id", "description", "completed", "created_at", "modified_at")

    @classmethod
    def parse_record(cls, raw: Any, position: int) -> Task:
        if not isinstance(raw, dict):
            raise TaskFormatError(f"record #{position} is not an object")
        missing = [name for name in cls.REQUIRED_FIELDS if name not in raw]
        if missing:
            raise TaskFormatError(f"record #{position} is missing {', '.join(missing)}")

        task_id = raw["id"]
        # bool is an int subclass; reject it explicitly
        if not isinstance(task_id, int) or isinstance(task_id, bool):
            raise TaskFormatError(f"record #{position} has non-integer id {task_id!r}")
        if not isinstance(raw["description"], str):
            raise TaskFormatError(f"record #{position} has non-string description")
        if not isinstance(raw["completed"], bool):
            raise TaskFormatError(f"record #{position} has non-boolean completed flag")
        try:
            created_at = decode_timestamp(raw["created_at"])
            modified_at = decode_timestamp(raw["modified_at"])
        except ValueError as exc:
            raise TaskFormatError(f"record #{position} has invalid timestamp: {exc}") from exc

        return Task(
            id=task_id,
            description=raw["description"],
            completed=raw["completed"],
            created_at=created_at,
            modified_at=modified_at,
        )

    @classmethod
    def parse(cls, content: str) -> List[Task]:
        """Parse file content. Empty or whitespace-only content is an empty list."""
        if not content.strip():
            return []
        try:
            data = json.loads(content)
        except json.JSONDecodeError as exc:
            raise TaskFormatError(f"invalid JSON at line {exc.lineno} column {exc.colno}: {exc.msg}") from exc
        if not isinstance(data, list):
            raise TaskFormatError("top-level value is not an array")

        tasks = [cls.parse_record(raw, position) for position, raw in enumerate(data, start=1)]
        seen: set[int] = set()
        for task in tasks:
            if task.id in seen:
                raise TaskFormatError(f"duplicate task id {task.id}")
            seen.add(task.id)
        return tasks

    @staticmethod
    def to_records(tasks: Sequence[Task]) -> List[Dict[str, Any]]:
        return [task.to_dict() for task in tasks]

    @classmethod
    def to_file_content(cls, tasks: Sequence[Task]) -> str:
        return json.dumps(cls.to_records(tasks), indent=2, ensure_ascii=False) + "\n"


__all__ = ["TaskFileParser", "TaskFormatError"]
