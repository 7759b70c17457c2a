"""Full-screen renderer: turns a controller snapshot into terminal output."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, Optional

from tabline.cli.core.ansi_text import truncate
from tabline.cli.core.terminal import Terminal, TerminalSize
from tabline.cli.widgets.base import Rect
from tabline.cli.widgets.input_box import INPUT_BOX_HEIGHT, InputBoxWidget
from tabline.cli.widgets.message_list import MessageListWidget
from tabline.cli.widgets.status_bar import Shortcut, StatusBarWidget
from tabline.cli.widgets.tab_bar import TabBarWidget
from tabline.cli.widgets.tab_pane import TabPaneWidget
from tabline.core.controller import Snapshot
from tabline.core.modes import InputMode
from tabline.core.shortcuts import ShortcutContext, ShortcutRegistry, get_shortcut_registry
from tabline.core.tabs import SelectedTab

HEADER_HEIGHT = 1
STATUS_HEIGHT = 1


@dataclass(frozen=True)
class Frame:
    """A composed screen: lines to print and where the cursor goes (0-indexed)."""
    lines: list[str]
    cursor: Optional[tuple[int, int]] = None


class TerminalRenderer:
    """
    Draws the application screen.

    Layout:
        +------------------------------------------+
        | Tab 1  Tab 2  Tab 3  Tab 4        title  |
        +------------------------------------------+
        | Tab 1: Messages box + Input box          |
        | Tabs 2-4: paragraph pane                 |
        +------------------------------------------+
        | Status bar (mode + shortcuts)            |
        +------------------------------------------+

    The terminal cursor is only shown while editing on the chat tab.
    """

    CHAT_TAB = SelectedTab.TAB_1

    def __init__(
        self,
        title: str = "",
        registry: Optional[ShortcutRegistry] = None,
        size: Callable[[], TerminalSize] = Terminal.size,
    ) -> None:
        self.registry = registry or get_shortcut_registry()
        self._size = size

        self.tab_bar = TabBarWidget(title)
        self.messages = MessageListWidget(self.CHAT_TAB.body)
        self.input_box = InputBoxWidget()
        self.tab_pane = TabPaneWidget()
        self.status_bar = StatusBarWidget()

    def draw(self, snapshot: Snapshot) -> None:
        """Render the full screen without flicker."""
        frame = self.compose(snapshot, self._size())

        # Move to home instead of clearing; each line clears its own tail
        Terminal.hide_cursor()
        Terminal.move_to(1, 1)
        sys.stdout.write('\r\n'.join(line + "\x1b[K" for line in frame.lines))
        sys.stdout.flush()

        if frame.cursor is not None:
            row, col = frame.cursor
            Terminal.move_to(row + 1, col + 1)
            Terminal.show_cursor()

    def compose(self, snapshot: Snapshot, size: TerminalSize) -> Frame:
        """Build the screen for a snapshot without touching the terminal."""
        width = size.cols
        body_height = max(0, size.rows - HEADER_HEIGHT - STATUS_HEIGHT)

        self.tab_bar.set_selected(snapshot.selected_tab)
        lines = self.tab_bar.render(Rect(0, 0, width, HEADER_HEIGHT))

        cursor: Optional[tuple[int, int]] = None
        if snapshot.selected_tab == self.CHAT_TAB:
            body, cursor = self._compose_chat(snapshot, width, body_height)
        else:
            self.tab_pane.set_tab(snapshot.selected_tab)
            body = self.tab_pane.render(Rect(0, HEADER_HEIGHT, width, body_height))
        lines.extend(body)

        self._update_status_bar(snapshot)
        lines.extend(self.status_bar.render(Rect(0, size.rows - 1, width, STATUS_HEIGHT)))

        return Frame([truncate(line, width) for line in lines[:size.rows]], cursor)

    def _compose_chat(
        self, snapshot: Snapshot, width: int, height: int
    ) -> tuple[list[str], Optional[tuple[int, int]]]:
        """Messages above, input box below; returns lines and cursor position."""
        input_height = min(INPUT_BOX_HEIGHT, height)
        messages_height = height - input_height

        self.messages.set_messages(snapshot.messages)
        lines = self.messages.render(Rect(0, HEADER_HEIGHT, width, messages_height))

        input_bounds = Rect(0, HEADER_HEIGHT + messages_height, width, input_height)
        self.input_box.set_state(
            snapshot.content, snapshot.cursor, snapshot.cursor_column, snapshot.input_mode
        )
        lines.extend(self.input_box.render(input_bounds))

        cursor = None
        if snapshot.input_mode == InputMode.EDITING and input_height == INPUT_BOX_HEIGHT:
            row, col = self.input_box.cursor_offset(input_bounds)
            cursor = (input_bounds.y + row, input_bounds.x + min(col, width - 2))
        return lines, cursor

    def _update_status_bar(self, snapshot: Snapshot) -> None:
        context = ShortcutContext.for_mode(snapshot.input_mode)
        hints = self.registry.get_status_bar_hints(context)
        self.status_bar.set_shortcuts([Shortcut(key, label) for key, label in hints])
        self.status_bar.set_left(
            snapshot.input_mode.label.upper(),
            highlight=snapshot.input_mode == InputMode.EDITING,
        )
