"""Single-line text buffer with a character-indexed cursor."""

from __future__ import annotations

from rich.cells import cell_len


class TextCursorBuffer:
    """
    A line of text being composed, plus a cursor.

    The cursor counts characters (code points), never encoded bytes, and is
    always kept within ``[0, len(content)]``. All edits rebuild the string
    from whole characters, so a multi-byte character is never split.
    """

    def __init__(self, content: str = "") -> None:
        self._content = content
        self._cursor = len(content)

    @property
    def content(self) -> str:
        return self._content

    @property
    def cursor(self) -> int:
        """Cursor position in characters."""
        return self._cursor

    @property
    def display_column(self) -> int:
        """Terminal column of the cursor (wide glyphs take two cells)."""
        return cell_len(self._content[:self._cursor])

    def __len__(self) -> int:
        return len(self._content)

    def insert(self, char: str) -> None:
        """Insert one character at the cursor and advance past it."""
        if len(char) != 1:
            raise ValueError(f"Expected a single character, got {char!r}")
        before = self._content[:self._cursor]
        after = self._content[self._cursor:]
        self._content = before + char + after
        self.move_right()

    def delete_before_cursor(self) -> None:
        """Remove the character left of the cursor (Backspace)."""
        if self._cursor == 0:
            return
        # Rebuild from the characters on either side of the deleted one
        before = self._content[:self._cursor - 1]
        after = self._content[self._cursor:]
        self._content = before + after
        self.move_left()

    def move_left(self) -> None:
        self._cursor = self._clamp(self._cursor - 1)

    def move_right(self) -> None:
        self._cursor = self._clamp(self._cursor + 1)

    def clear(self) -> None:
        """Empty the buffer and reset the cursor."""
        self._content = ""
        self._cursor = 0

    def _clamp(self, position: int) -> int:
        return max(0, min(position, len(self._content)))

    def __repr__(self) -> str:
        return f"TextCursorBuffer(content={self._content!r}, cursor={self._cursor})"
