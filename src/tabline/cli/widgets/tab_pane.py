"""Paragraph view for tabs without a dedicated widget."""

from __future__ import annotations

import textwrap

from tabline.cli.widgets.base import BaseWidget, Rect, boxed
from tabline.core.tabs import SelectedTab

# Border color (purple)
PANE_COLOR = "38;5;54"


class TabPaneWidget(BaseWidget):
    """Bordered, word-wrapped paragraph of the selected tab's text."""

    def __init__(self) -> None:
        self._tab = SelectedTab.default()

    def set_tab(self, tab: SelectedTab) -> None:
        self._tab = tab

    def render(self, bounds: Rect) -> list[str]:
        # One cell of horizontal padding inside the border
        wrap_width = max(1, bounds.width - 4)
        lines = [f" {line}" for line in textwrap.wrap(self._tab.body, wrap_width)]
        return boxed(lines, bounds, title=self._tab.title, color=PANE_COLOR)
