"""Header row: tab titles on the left, application title on the right."""

from __future__ import annotations

from tabline.cli.core.ansi_text import pad_to_width, truncate, visible_len
from tabline.cli.widgets.base import BaseWidget, Rect
from tabline.core.tabs import SelectedTab

TITLE_WIDTH = 20


class TabBarWidget(BaseWidget):
    """
    One-line tab strip.

    Unselected titles are magenta, the selected one is bold white.
    """

    def __init__(self, title: str = "") -> None:
        self.title = title
        self._selected = SelectedTab.default()

    def set_selected(self, tab: SelectedTab) -> None:
        self._selected = tab

    def render(self, bounds: Rect) -> list[str]:
        title_width = min(TITLE_WIDTH, max(0, bounds.width // 3)) if self.title else 0
        tabs_width = bounds.width - title_width

        parts: list[str] = []
        for tab in SelectedTab:
            if tab == self._selected:
                parts.append(f"\x1b[1;97m  {tab.title}  \x1b[0m")
            else:
                parts.append(f"\x1b[35m  {tab.title}  \x1b[0m")
        tabs = pad_to_width(truncate(" ".join(parts), tabs_width), tabs_width)

        if not title_width:
            return [tabs]

        title = truncate(self.title, title_width, reset=False)
        title = " " * (title_width - visible_len(title)) + title
        return [f"{tabs}\x1b[1;35m{title}\x1b[0m"]
