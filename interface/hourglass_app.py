#!/usr/bin/env python3
"""
hourglass: terminal task list.

Loads the backing file from the working directory, then hands the terminal
over to HourglassTUI until the user quits.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from config import get_log_file, get_log_level, get_tick_ms, get_user_theme
from core import AppState, PersistenceLoadError, TaskStore
from infrastructure.file_repository import JsonFileTaskRepository
from .tui_app import HourglassTUI

logger = logging.getLogger("hourglass")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(log_file: Optional[str] = None, level: Optional[str] = None) -> None:
    """Keep log records off the terminal; optionally send them to a file."""
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())
    path = log_file if log_file is not None else get_log_file()
    if not path:
        return
    try:
        handler = logging.FileHandler(Path(path).expanduser(), encoding="utf-8")
    except OSError as exc:
        print(f"hourglass: cannot open log file {path}: {exc}", file=sys.stderr)
        return
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    level_name = (level or get_log_level()).upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))


def build_state(repository: JsonFileTaskRepository) -> AppState:
    """Load persisted tasks into a fresh state. Raises PersistenceLoadError."""
    return AppState(store=TaskStore.from_tasks(repository.load()))


def cmd_tui(base_dir: Optional[Path] = None) -> int:
    repository = JsonFileTaskRepository(base_dir)
    try:
        state = build_state(repository)
    except PersistenceLoadError as exc:
        logger.error("%s", exc)
        print(f"hourglass: {exc}", file=sys.stderr)
        return 1

    tui = HourglassTUI(state, repository, theme=get_user_theme(), tick_ms=get_tick_ms())
    try:
        tui.run()
    except OSError as exc:
        logger.error("Terminal session failed: %s", exc)
        print(f"hourglass: terminal error: {exc}", file=sys.stderr)
        return 1
    return 0


def main() -> int:
    """Main entry point."""
    configure_logging()
    return cmd_tui()


if __name__ == "__main__":
    sys.exit(main())
