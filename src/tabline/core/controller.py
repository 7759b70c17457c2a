"""Application controller: owns the editing state and dispatches key events."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from tabline.core.events import KeyEvent
from tabline.core.message_log import MessageLog
from tabline.core.modes import InputMode, RunState
from tabline.core.shortcuts import (
    Action,
    ShortcutContext,
    ShortcutRegistry,
    get_shortcut_registry,
)
from tabline.core.tabs import SelectedTab
from tabline.core.text_buffer import TextCursorBuffer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    """Immutable view of the controller state handed to the renderer."""
    run_state: RunState
    input_mode: InputMode
    selected_tab: SelectedTab
    content: str
    cursor: int
    cursor_column: int
    messages: tuple[str, ...]


class EventSource(Protocol):
    """Anything that can block for the next key event."""

    def read_blocking(self) -> KeyEvent:
        ...


class Renderer(Protocol):
    """Anything that can draw a snapshot."""

    def draw(self, snapshot: Snapshot) -> None:
        ...


class AppController:
    """
    Composes the input line, message log and tab selection.

    In Normal mode keys are commands (edit, tab navigation, quit). In
    Editing mode they edit the input line; Left/Right move the text
    cursor and Esc goes back to Normal. Only key presses are acted on.
    """

    def __init__(self, registry: Optional[ShortcutRegistry] = None) -> None:
        self.registry = registry or get_shortcut_registry()
        self.run_state = RunState.RUNNING
        self.input_mode = InputMode.NORMAL
        self.selected_tab = SelectedTab.default()
        self.buffer = TextCursorBuffer()
        self.messages = MessageLog()

    @property
    def running(self) -> bool:
        return self.run_state == RunState.RUNNING

    def run(self, events: EventSource, renderer: Renderer) -> None:
        """
        Main application loop.

        Errors raised by the event source are not handled here; they
        propagate to the caller, which owns terminal restoration.
        """
        logger.info("Event loop started")
        renderer.draw(self.snapshot())
        while self.running:
            event = events.read_blocking()
            self.handle_event(event)
            renderer.draw(self.snapshot())
        logger.info("Event loop finished with %d message(s)", len(self.messages))

    def handle_event(self, event: KeyEvent) -> bool:
        """Dispatch one key event. Returns True if it changed any state."""
        if not event.is_press:
            return False

        context = ShortcutContext.for_mode(self.input_mode)
        shortcut = self.registry.match(event, context)
        if shortcut is not None:
            self.perform(shortcut.action)
            return True

        if self.input_mode == InputMode.EDITING and event.is_char:
            self.buffer.insert(event.char)
            return True

        # Unbound key
        return False

    def perform(self, action: Action) -> None:
        """Apply a single action to the owned state."""
        if action == Action.ENTER_EDITING:
            self.input_mode = InputMode.EDITING
            logger.debug("Entered editing mode")
        elif action == Action.LEAVE_EDITING:
            self.input_mode = InputMode.NORMAL
            logger.debug("Returned to normal mode")
        elif action == Action.QUIT:
            self.quit()
        elif action == Action.NEXT_TAB:
            self.next_tab()
        elif action == Action.PREVIOUS_TAB:
            self.previous_tab()
        elif action == Action.COMMIT:
            self.submit_message()
        elif action == Action.DELETE_BEFORE_CURSOR:
            self.buffer.delete_before_cursor()
        elif action == Action.CURSOR_LEFT:
            self.buffer.move_left()
        elif action == Action.CURSOR_RIGHT:
            self.buffer.move_right()
        else:
            raise ValueError(f"Unknown action: {action}")

    def next_tab(self) -> None:
        self.selected_tab = self.selected_tab.next()
        logger.debug("Selected %s", self.selected_tab.title)

    def previous_tab(self) -> None:
        self.selected_tab = self.selected_tab.previous()
        logger.debug("Selected %s", self.selected_tab.title)

    def submit_message(self) -> None:
        """Move the input line into the message log and reset it."""
        self.messages.append(self.buffer.content)
        self.buffer.clear()
        logger.debug("Committed message #%d", len(self.messages) - 1)

    def quit(self) -> None:
        self.run_state = RunState.QUITTING
        logger.info("Quit requested")

    def snapshot(self) -> Snapshot:
        return Snapshot(
            run_state=self.run_state,
            input_mode=self.input_mode,
            selected_tab=self.selected_tab,
            content=self.buffer.content,
            cursor=self.buffer.cursor,
            cursor_column=self.buffer.display_column,
            messages=self.messages.lines,
        )
