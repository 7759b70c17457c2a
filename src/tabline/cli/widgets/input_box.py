"""Bordered single-line input box."""

from __future__ import annotations

from rich.cells import cell_len

from tabline.cli.widgets.base import BaseWidget, Rect, boxed
from tabline.core.modes import InputMode

INPUT_BOX_HEIGHT = 3


class InputBoxWidget(BaseWidget):
    """
    Displays the line being edited.

    The text is yellow while editing. If the text before the cursor is
    wider than the box, the view scrolls so the cursor stays inside it.
    """

    def __init__(self) -> None:
        self._content = ""
        self._cursor = 0
        self._cursor_column = 0
        self._mode = InputMode.NORMAL

    def set_state(self, content: str, cursor: int, cursor_column: int, mode: InputMode) -> None:
        self._content = content
        self._cursor = cursor
        self._cursor_column = cursor_column
        self._mode = mode

    def _scroll_start(self, inner_width: int) -> int:
        """First visible character index so the cursor fits in inner_width cells."""
        if self._cursor_column < inner_width:
            return 0
        start = 0
        while start < self._cursor and cell_len(self._content[start:self._cursor]) > inner_width - 1:
            start += 1
        return start

    def cursor_offset(self, bounds: Rect) -> tuple[int, int]:
        """Cursor (row, col) relative to the widget's top-left corner."""
        inner_width = max(1, bounds.width - 2)
        start = self._scroll_start(inner_width)
        if start == 0:
            return 1, 1 + self._cursor_column
        return 1, 1 + cell_len(self._content[start:self._cursor])

    def render(self, bounds: Rect) -> list[str]:
        inner_width = max(1, bounds.width - 2)
        text = self._content[self._scroll_start(inner_width):]
        if self._mode == InputMode.EDITING:
            text = f"\x1b[33m{text}\x1b[0m"
        return boxed([text], bounds, title="Input")
