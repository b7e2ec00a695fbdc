#!/usr/bin/env python3
"""Unit tests for tui_render projections."""

import time
from datetime import datetime, timedelta, timezone

from core import AppState, SelectionCursor, TaskStore, View
from interface.tui_render import (
    HIGHLIGHT_SYMBOL,
    KEY_HINTS,
    command_title,
    detail_fields,
    render_command_input,
    render_status_bar,
    render_task_detail,
    render_task_table,
)
from util.responsive import display_width
from util.timefmt import TIME_FORMAT, convert_utc_to_local

CREATED = datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc)
NOW = CREATED + timedelta(minutes=5)


def _text(fragments) -> str:
    return "".join(text for _, text in fragments)


def _lines(fragments):
    return _text(fragments).split("\n")


def _state(descriptions=(), selected=None) -> AppState:
    store = TaskStore(clock=lambda: CREATED)
    for text in descriptions:
        store.append(text)
    return AppState(store=store, cursor=SelectionCursor(selected))


class TestTaskTable:
    def test_header_columns(self):
        header = _lines(render_task_table(_state(), 80, NOW))[0]
        assert "ID" in header
        assert "Description" in header
        assert "Age" in header
        assert header.index("ID") < header.index("Description") < header.index("Age")

    def test_empty_store_shows_hint(self):
        fragments = render_task_table(_state(), 80, NOW)
        assert ("class:hint", "No tasks yet. Press a to add one.") in list(fragments)

    def test_rows_follow_store_order(self):
        lines = _lines(render_task_table(_state(["first", "second"]), 80, NOW))
        assert "first" in lines[1]
        assert "second" in lines[2]

    def test_row_shows_id_and_age(self):
        row = _lines(render_task_table(_state(["Buy milk"]), 80, NOW))[1]
        assert row.split()[0] == "1"
        assert "Buy milk" in row
        assert row.rstrip().endswith("5min")

    def test_selected_row_is_marked(self):
        lines = _lines(render_task_table(_state(["a", "b"], selected=1), 80, NOW))
        assert lines[1].startswith(" ")
        assert lines[2].startswith(HIGHLIGHT_SYMBOL)

    def test_row_styles(self):
        state = _state(["open", "done", "done-selected", "selected"], selected=2)
        state.store.toggle_completed(1)
        state.store.toggle_completed(2)
        styles = [style for style, text in render_task_table(state, 80, NOW) if text.strip() and style != "class:header"]
        assert styles == ["class:text", "class:task.done", "class:selected.done", "class:text"]

        state.cursor = SelectionCursor(3)
        styles = [style for style, text in render_task_table(state, 80, NOW) if text.strip() and style != "class:header"]
        assert styles[-1] == "class:selected"

    def test_rows_fit_width(self):
        state = _state(["x" * 200, "宽字符" * 40], selected=0)
        for line in _lines(render_task_table(state, 60, NOW)):
            assert display_width(line) <= 60

    def test_multiline_description_stays_on_one_row(self):
        lines = _lines(render_task_table(_state(["one\ntwo"]), 80, NOW))
        assert "one two" in lines[1]


class TestTaskDetail:
    def test_nothing_selected_renders_empty(self):
        assert list(render_task_detail(_state(["a"]), NOW)) == []

    def test_stale_selection_renders_empty(self):
        assert list(render_task_detail(_state(["a"], selected=4), NOW)) == []

    def test_detail_fields(self):
        state = _state(["Buy milk"], selected=0)
        fields = dict(detail_fields(state.selected_task(), NOW))
        assert fields["ID"] == "1"
        assert fields["Description"] == "Buy milk"
        assert fields["Age"] == "5min"
        assert fields["Created at"] == convert_utc_to_local(CREATED, TIME_FORMAT)
        assert fields["Modified at"] == convert_utc_to_local(CREATED, TIME_FORMAT)

    def test_detail_panel_layout(self):
        lines = _lines(render_task_detail(_state(["Buy milk"], selected=0), NOW))
        assert lines[0].startswith("Name")
        assert "Value" in lines[0]
        assert set(lines[1].replace(" ", "")) == {"-"}
        assert lines[2].startswith("ID:")
        assert any(line.startswith("Description:") and "Buy milk" in line for line in lines)


class TestCommandBox:
    def test_titles_per_view(self):
        assert command_title(View.BROWSING) == "Command"
        assert command_title(View.PENDING_ADD) == "Command - Add task"
        assert command_title(View.PENDING_UPDATE) == "Command - Update task"

    def test_input_echoes_buffer(self):
        state = _state()
        for ch in "hi":
            state.input_buffer.push_char(ch)
        assert _text(render_command_input(state)) == "hi"


class TestStatusBar:
    def test_shows_key_hint_by_default(self):
        fragments = list(render_status_bar(_state()))
        assert fragments == [("class:hint", f" {KEY_HINTS[View.BROWSING]}")]

    def test_shows_active_message(self):
        state = _state()
        state.set_status_message("Save failed: disk full")
        style, text = list(render_status_bar(state))[0]
        assert style == "class:status.warn"
        assert "disk full" in text

    def test_expired_message_falls_back_to_hint(self):
        state = _state()
        state.set_status_message("old", ttl=1.0)
        style, _ = list(render_status_bar(state, now_ts=time.time() + 5))[0]
        assert style == "class:hint"
