#!/usr/bin/env python3
"""TUI application - HourglassTUI class."""

import logging
from datetime import datetime
from typing import Callable, Optional

from prompt_toolkit.application import Application
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.input import Input
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.layout.dimension import Dimension
from prompt_toolkit.output import Output
from prompt_toolkit.styles import Style
from prompt_toolkit.widgets import Frame

from application.dispatcher import (
    CommandDispatcher,
    KEY_BACKSPACE,
    KEY_DOWN,
    KEY_ENTER,
    KEY_ESCAPE,
    KEY_UP,
)
from application.ports import TaskRepository
from config import DEFAULT_TICK_MS, get_ttimeoutlen
from core import AppState, utc_now
from .tui_render import (
    command_title,
    render_command_input,
    render_status_bar,
    render_task_detail,
    render_task_table,
)
from .tui_themes import DEFAULT_THEME, build_style

logger = logging.getLogger("hourglass.tui")

# Frame borders take one column on each side.
FRAME_INSET = 2


class HourglassTUI:
    """Full-screen task list.

    Every key goes through the CommandDispatcher, which owns the mode logic.
    The bindings here only translate prompt_toolkit key presses into key names.
    """

    @classmethod
    def build_style(cls, theme: str) -> Style:
        return build_style(theme)

    def __init__(
        self,
        state: AppState,
        repository: Optional[TaskRepository] = None,
        theme: str = DEFAULT_THEME,
        tick_ms: int = DEFAULT_TICK_MS,
        *,
        clock: Optional[Callable[[], datetime]] = None,
        input: Optional[Input] = None,
        output: Optional[Output] = None,
    ):
        self.state = state
        self.dispatcher = CommandDispatcher(state, repository)
        self.theme_name = theme
        self.style = self.build_style(theme)
        self._clock = clock or utc_now

        kb = KeyBindings()
        kb.timeout = 0

        @kb.add("enter")
        def _(event):
            self.handle_key(KEY_ENTER)

        @kb.add("escape", eager=True)
        def _(event):
            self.handle_key(KEY_ESCAPE)

        @kb.add("backspace")
        def _(event):
            self.handle_key(KEY_BACKSPACE)

        @kb.add("up")
        @kb.add(Keys.ScrollUp)
        def _(event):
            self.handle_key(KEY_UP)

        @kb.add("down")
        @kb.add(Keys.ScrollDown)
        def _(event):
            self.handle_key(KEY_DOWN)

        @kb.add(Keys.Any)
        def _(event):
            key = event.key_sequence[0].key if event.key_sequence else None
            if not isinstance(key, str):
                return
            # Special keys arrive as multi-char tokens like 'c-a' or 'f1'.
            if len(key) != 1:
                return
            self.handle_key(key)

        # Full-screen mode enables bracketed paste, so a paste is one event.
        @kb.add(Keys.BracketedPaste)
        def _(event):
            self.handle_paste(event.data)

        self.task_table = Window(
            content=FormattedTextControl(self.get_task_table_text),
            always_hide_cursor=True,
            wrap_lines=False,
            height=Dimension(weight=1),
        )
        self.detail_view = Window(
            content=FormattedTextControl(self.get_detail_text),
            always_hide_cursor=True,
            wrap_lines=True,
            height=Dimension(weight=1),
        )
        self.command_box = Window(
            content=FormattedTextControl(self.get_command_text),
            height=1,
            always_hide_cursor=True,
        )
        self.status_bar = Window(content=FormattedTextControl(self.get_status_text), height=1, always_hide_cursor=True)

        root = HSplit(
            [
                Frame(self.task_table, title="Tasks"),
                Frame(self.detail_view),
                Frame(self.command_box, title=self.get_command_title),
                self.status_bar,
            ]
        )

        self.app = Application(
            layout=Layout(root),
            key_bindings=kb,
            style=self.style,
            full_screen=True,
            mouse_support=True,
            refresh_interval=max(1, tick_ms) / 1000.0,
            input=input,
            output=output,
        )
        self.app.ttimeoutlen = get_ttimeoutlen()

    # ------------------------------------------------------------------ input
    def handle_key(self, key: str) -> None:
        self.dispatcher.handle_key(key)
        if self.state.should_quit:
            self.quit()
            return
        self.force_render()

    def handle_paste(self, text: str) -> None:
        self.dispatcher.paste(text)
        self.force_render()

    def quit(self) -> None:
        if self.app.is_running:
            self.app.exit()

    def force_render(self) -> None:
        app = getattr(self, "app", None)
        if app:
            app.invalidate()

    # -------------------------------------------------------------- rendering
    def content_width(self) -> int:
        try:
            columns = self.app.output.get_size().columns
        except OSError:
            columns = 100
        return max(10, columns - FRAME_INSET)

    def get_task_table_text(self) -> FormattedText:
        return render_task_table(self.state, self.content_width(), self._clock())

    def get_detail_text(self) -> FormattedText:
        return render_task_detail(self.state, self._clock())

    def get_command_title(self) -> str:
        return command_title(self.state.view)

    def get_command_text(self) -> FormattedText:
        return render_command_input(self.state)

    def get_status_text(self) -> FormattedText:
        return render_status_bar(self.state)

    def run(self) -> None:
        logger.debug("Starting TUI with %d tasks", len(self.state.store))
        self.app.run()


__all__ = ["HourglassTUI", "FRAME_INSET"]
