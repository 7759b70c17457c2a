"""Status bar widget for displaying the input mode and shortcuts."""

from __future__ import annotations

from dataclasses import dataclass

from tabline.cli.core.ansi_text import truncate, visible_len
from tabline.cli.widgets.base import BaseWidget, Rect


@dataclass
class Shortcut:
    """A keyboard shortcut to display."""
    key: str
    label: str


class StatusBarWidget(BaseWidget):
    """Bottom status bar showing info and keyboard shortcuts."""

    def __init__(self) -> None:
        self._left_text: str = ""
        self._shortcuts: list[Shortcut] = []
        self._highlight = False

    def set_left(self, text: str, highlight: bool = False) -> None:
        """Set left-aligned text (e.g., the input mode)."""
        self._left_text = text
        self._highlight = highlight

    def set_shortcuts(self, shortcuts: list[Shortcut]) -> None:
        """Set keyboard shortcuts to display."""
        self._shortcuts = shortcuts

    def render(self, bounds: Rect) -> list[str]:
        """Render the status bar, fitting within bounds.width."""
        width = bounds.width

        left = f" {self._left_text} "
        if self._highlight:
            left_str = f"\x1b[1;30;43m{left}\x1b[0;100;97m"
        else:
            left_str = f"\x1b[1m{left}\x1b[0;100;97m"
        left_len = visible_len(left)

        # Build shortcuts from the left, only include what fits
        shortcut_parts: list[str] = []
        shortcuts_len = 0
        for sc in self._shortcuts:
            part = f" \x1b[7m {sc.key} \x1b[27m {sc.label}"
            part_len = visible_len(part)
            if left_len + shortcuts_len + part_len > width:
                break
            shortcut_parts.append(part)
            shortcuts_len += part_len

        padding = " " * max(0, width - left_len - shortcuts_len)
        line = f"\x1b[100m\x1b[97m{left_str}{''.join(shortcut_parts)}{padding}\x1b[0m"

        return [truncate(line, width)]
