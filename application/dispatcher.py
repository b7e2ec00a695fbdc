"""Command dispatcher: routes one key event into state mutations.

The current view decides how a key is read. In BROWSING a key is a
single-key command; in PENDING_ADD / PENDING_UPDATE it edits the input buffer
until Enter commits or Escape cancels. Every successful mutation is saved
before ``handle_key`` returns.
"""

from __future__ import annotations

import logging
from typing import Optional

from application.ports import TaskRepository
from core import AppState, IndexOutOfRange, PersistenceWriteError, View

KEY_UP = "up"
KEY_DOWN = "down"
KEY_ENTER = "enter"
KEY_ESCAPE = "escape"
KEY_BACKSPACE = "backspace"

logger = logging.getLogger("hourglass.dispatch")


def is_printable_key(key: str) -> bool:
    return len(key) == 1 and key.isprintable()


class CommandDispatcher:
    def __init__(self, state: AppState, repository: Optional[TaskRepository] = None):
        self.state = state
        self.repository = repository

    def handle_key(self, key: str) -> None:
        view = self.state.view
        if view == View.BROWSING:
            self._handle_browsing_key(key)
        elif view.is_text_entry:
            self._handle_text_entry_key(key)
        # View.ISSUES is reserved; nothing is routed there yet.

    # ------------------------------------------------------------------ browsing
    def _handle_browsing_key(self, key: str) -> None:
        state = self.state
        if key == "q":
            state.should_quit = True
        elif key in ("j", KEY_DOWN):
            state.cursor.advance(len(state.store))
        elif key in ("k", KEY_UP):
            state.cursor.retreat(len(state.store))
        elif key == "d":
            self.toggle_selected()
        elif key == "a":
            self._enter(View.PENDING_ADD)
        elif key == "u":
            self._enter(View.PENDING_UPDATE)
        elif key == "x":
            self.remove_selected()

    def _enter(self, view: View) -> None:
        self.state.input_buffer.clear()
        self.state.view = view
        logger.debug("Entered %s", view.value)

    def toggle_selected(self) -> None:
        index = self.state.cursor.current()
        if index is None:
            return
        try:
            self.state.store.toggle_completed(index)
        except IndexOutOfRange:
            logger.debug("Toggle ignored: stale selection %s", index)
            return
        self.persist()

    def remove_selected(self) -> None:
        state = self.state
        index = state.cursor.current()
        if index is None:
            return
        try:
            removed = state.store.remove(index)
        except IndexOutOfRange:
            logger.debug("Remove ignored: stale selection %s", index)
            state.cursor.clamp(len(state.store))
            return
        state.cursor.clamp(len(state.store))
        logger.debug("Removed task %s", removed.id)
        self.persist()

    # ---------------------------------------------------------------- text entry
    def _handle_text_entry_key(self, key: str) -> None:
        buffer = self.state.input_buffer
        if key == KEY_ENTER:
            self.commit()
        elif key == KEY_ESCAPE:
            self.cancel()
        elif key == KEY_BACKSPACE:
            buffer.pop_char()
        elif is_printable_key(key):
            buffer.push_char(key)

    def paste(self, text: str) -> None:
        """Append pasted text to the buffer; control characters are dropped."""
        if not self.state.view.is_text_entry:
            return
        for ch in text:
            if is_printable_key(ch):
                self.state.input_buffer.push_char(ch)

    def commit(self) -> None:
        state = self.state
        text = state.input_buffer.take()
        view = state.view
        state.view = View.BROWSING
        if view == View.PENDING_ADD:
            task = state.store.append(text)
            logger.debug("Added task %s", task.id)
            self.persist()
        elif view == View.PENDING_UPDATE:
            index = state.cursor.current()
            if index is None:
                return
            try:
                state.store.update_description(index, text)
            except IndexOutOfRange:
                logger.debug("Update ignored: stale selection %s", index)
                return
            self.persist()

    def cancel(self) -> None:
        self.state.input_buffer.clear()
        self.state.view = View.BROWSING

    # --------------------------------------------------------------- persistence
    def persist(self) -> bool:
        """Save the full store; a failure is reported but never raised."""
        if self.repository is None:
            return True
        try:
            self.repository.save(self.state.store.tasks())
        except PersistenceWriteError as exc:
            logger.warning("Keeping in-memory tasks after failed save: %s", exc)
            self.state.set_status_message(f"Save failed: {exc.reason}", ttl=8.0)
            return False
        return True


__all__ = [
    "CommandDispatcher",
    "is_printable_key",
    "KEY_UP",
    "KEY_DOWN",
    "KEY_ENTER",
    "KEY_ESCAPE",
    "KEY_BACKSPACE",
]
