"""Projects AppState into prompt_toolkit formatted text.

All functions here are read-only over the state.
"""

from datetime import datetime
from typing import List, Optional, Tuple

from prompt_toolkit.formatted_text import FormattedText

from core import AppState, Task, View
from util.responsive import ColumnLayout, pad_display
from util.timefmt import TIME_FORMAT, age_of, convert_utc_to_local

TASK_TABLE_LAYOUT = ColumnLayout(columns=[("id", 10), ("description", 70), ("age", 10)])
TASK_TABLE_HEADERS = {"id": "ID", "description": "Description", "age": "Age"}
HIGHLIGHT_SYMBOL = "*"

DETAIL_COLUMNS = ("Name", "Value")
DETAIL_COLUMN_WIDTH = 12
DETAIL_GAP = 2
DETAIL_BORDER_CHAR = "-"

COMMAND_TITLES = {
    View.PENDING_ADD: "Command - Add task",
    View.PENDING_UPDATE: "Command - Update task",
}

KEY_HINTS = {
    View.BROWSING: "q quit · j/k move · a add · u update · d done · x delete",
    View.PENDING_ADD: "Enter save · Esc cancel",
    View.PENDING_UPDATE: "Enter save · Esc cancel",
    View.ISSUES: "",
}


def _row_style(selected: bool, completed: bool) -> str:
    if selected and completed:
        return "class:selected.done"
    if selected:
        return "class:selected"
    if completed:
        return "class:task.done"
    return "class:text"


def render_task_table(state: AppState, width: int, now: datetime) -> FormattedText:
    widths = TASK_TABLE_LAYOUT.calculate_widths(max(0, width - len(HIGHLIGHT_SYMBOL)))
    gap = " " * TASK_TABLE_LAYOUT.spacing
    names = [name for name, _ in TASK_TABLE_LAYOUT.columns]

    fragments: List[Tuple[str, str]] = [("", " " * len(HIGHLIGHT_SYMBOL))]
    for pos, name in enumerate(names):
        if pos:
            fragments.append(("", gap))
        fragments.append(("class:header", pad_display(TASK_TABLE_HEADERS[name], widths[name])))
    fragments.append(("", "\n"))

    tasks = state.store.tasks()
    if not tasks:
        fragments.append(("class:hint", "No tasks yet. Press a to add one."))
        return FormattedText(fragments)

    selected = state.cursor.current()
    for index, task in enumerate(tasks):
        is_selected = index == selected
        style = _row_style(is_selected, task.completed)
        values = {
            "id": str(task.id),
            "description": " ".join(task.description.split()),
            "age": age_of(task.created_at, now),
        }
        cells = gap.join(pad_display(values[name], widths[name]) for name in names)
        marker = HIGHLIGHT_SYMBOL if is_selected else " " * len(HIGHLIGHT_SYMBOL)
        fragments.append((style, marker + cells))
        fragments.append(("", "\n"))
    return FormattedText(fragments)


def detail_fields(task: Task, now: datetime) -> List[Tuple[str, str]]:
    return [
        ("ID", str(task.id)),
        ("Description", task.description),
        ("Age", age_of(task.created_at, now)),
        ("Created at", convert_utc_to_local(task.created_at, TIME_FORMAT)),
        ("Modified at", convert_utc_to_local(task.modified_at, TIME_FORMAT)),
    ]


def render_task_detail(state: AppState, now: datetime) -> FormattedText:
    task: Optional[Task] = state.selected_task()
    if task is None:
        return FormattedText([])

    header = "".join(col.ljust(DETAIL_COLUMN_WIDTH + DETAIL_GAP) for col in DETAIL_COLUMNS)
    border = "".join(DETAIL_BORDER_CHAR * DETAIL_COLUMN_WIDTH + " " * DETAIL_GAP for _ in DETAIL_COLUMNS)
    fragments: List[Tuple[str, str]] = [
        ("class:text", header.rstrip()),
        ("", "\n"),
        ("class:border", border.rstrip()),
        ("", "\n"),
    ]
    for name, value in detail_fields(task, now):
        label = f"{name}:".ljust(DETAIL_COLUMN_WIDTH + DETAIL_GAP)
        fragments.append(("class:field", f"{label}{value}"))
        fragments.append(("", "\n"))
    return FormattedText(fragments)


def command_title(view: View) -> str:
    return COMMAND_TITLES.get(view, "Command")


def render_command_input(state: AppState) -> FormattedText:
    return FormattedText([("class:input", state.input_buffer.text)])


def render_status_bar(state: AppState, now_ts: Optional[float] = None) -> FormattedText:
    message = state.active_status_message(now_ts)
    if message:
        return FormattedText([("class:status.warn", f" {message}")])
    return FormattedText([("class:hint", f" {KEY_HINTS.get(state.view, '')}")])


__all__ = [
    "render_task_table",
    "render_task_detail",
    "render_command_input",
    "render_status_bar",
    "command_title",
    "detail_fields",
]
