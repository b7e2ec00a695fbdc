import logging
import os
import tempfile
from pathlib import Path
from typing import List, Optional, Sequence

from core import PersistenceLoadError, PersistenceWriteError, Task
from application.ports import TaskRepository
from infrastructure.task_file_parser import TaskFileParser, TaskFormatError

HOURGLASS_EXTENSION = "hourglass"
HOURGLASS_FILE_STORAGE_NAME = f"tasks.{HOURGLASS_EXTENSION}"

logger = logging.getLogger("hourglass.storage")


class JsonFileTaskRepository(TaskRepository):
    """Single JSON backing file inside a working directory.

    ``tasks.hourglass`` is preferred; any other ``*.hourglass`` file in the
    directory is picked up when it is absent (first by name).
    """

    def __init__(self, base_dir: Optional[Path] = None, filename: str = HOURGLASS_FILE_STORAGE_NAME):
        self.base_dir = Path(base_dir) if base_dir is not None else Path.cwd()
        self.filename = filename
        self.path = self._resolve_path()

    def _resolve_path(self) -> Path:
        preferred = self.base_dir / self.filename
        if preferred.exists():
            return preferred
        try:
            candidates = sorted(p for p in self.base_dir.glob(f"*.{HOURGLASS_EXTENSION}") if p.is_file())
        except OSError:
            candidates = []
        return candidates[0] if candidates else preferred

    def load(self) -> List[Task]:
        if not self.path.exists():
            self._create_empty()
            return []
        try:
            content = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise PersistenceLoadError(self.path, str(exc)) from exc
        try:
            tasks = TaskFileParser.parse(content)
        except TaskFormatError as exc:
            raise PersistenceLoadError(self.path, str(exc)) from exc
        logger.info("Loaded %d tasks from %s", len(tasks), self.path)
        return tasks

    def _create_empty(self) -> None:
        try:
            self._write_atomic(TaskFileParser.to_file_content([]))
        except OSError as exc:
            raise PersistenceLoadError(self.path, f"cannot create backing file: {exc}") from exc
        logger.info("Created empty backing file %s", self.path)

    def save(self, tasks: Sequence[Task]) -> None:
        try:
            self._write_atomic(TaskFileParser.to_file_content(tasks))
        except OSError as exc:
            logger.warning("Saving %d tasks to %s failed: %s", len(tasks), self.path, exc)
            raise PersistenceWriteError(self.path, str(exc)) from exc

    def _write_atomic(self, content: str) -> None:
        """Write to a sibling temp file, fsync, then rename over the target."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path: Optional[Path] = None
        try:
            with tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                delete=False,
                dir=str(self.path.parent),
                prefix=f".{self.path.name}.",
                suffix=".tmp",
            ) as tmp:
                tmp_path = Path(tmp.name)
                tmp.write(content)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(str(tmp_path), str(self.path))
        finally:
            if tmp_path and tmp_path.exists():
                try:
                    tmp_path.unlink()
                except OSError:
                    logger.debug("Could not remove temp file %s", tmp_path)


__all__ = ["JsonFileTaskRepository", "HOURGLASS_EXTENSION", "HOURGLASS_FILE_STORAGE_NAME"]
