"""Bordered list of committed messages."""

from __future__ import annotations

from tabline.cli.widgets.base import BaseWidget, Rect, boxed


class MessageListWidget(BaseWidget):
    """
    Shows the message log as ``"<index>: <text>"`` rows.

    When the log is taller than the box, the newest entries stay visible.
    An empty log shows the placeholder text in grey.
    """

    def __init__(self, placeholder: str = "") -> None:
        self.placeholder = placeholder
        self._messages: tuple[str, ...] = ()

    def set_messages(self, messages: tuple[str, ...]) -> None:
        self._messages = messages

    def render(self, bounds: Rect) -> list[str]:
        if not self._messages and self.placeholder:
            return boxed([f"\x1b[90m{self.placeholder}\x1b[0m"], bounds, title="Messages")

        rows = [f"{i}: {m}" for i, m in enumerate(self._messages)]
        visible = max(0, bounds.height - 2)
        if len(rows) > visible:
            rows = rows[len(rows) - visible:]
        return boxed(rows, bounds, title="Messages")
