"""Fixed set of tabs with saturating next/previous selection."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class SelectedTab(Enum):
    """
    The views shown in the tab bar, identified by rank.

    Moving past either end keeps the current tab; selection never wraps.
    """
    TAB_1 = 0
    TAB_2 = 1
    TAB_3 = 2
    TAB_4 = 3

    @classmethod
    def default(cls) -> SelectedTab:
        return cls.TAB_1

    @classmethod
    def from_rank(cls, rank: int) -> Optional[SelectedTab]:
        """Look up a tab by rank, or None if the rank is out of range."""
        for tab in cls:
            if tab.value == rank:
                return tab
        return None

    @property
    def rank(self) -> int:
        return self.value

    @property
    def title(self) -> str:
        return f"Tab {self.value + 1}"

    @property
    def body(self) -> str:
        """Paragraph shown when the tab has no dedicated view."""
        return _TAB_BODIES[self]

    def next(self) -> SelectedTab:
        """Get the next tab, or this tab if it is the last one."""
        found = SelectedTab.from_rank(self.rank + 1)
        return found if found is not None else self

    def previous(self) -> SelectedTab:
        """Get the previous tab, or this tab if it is the first one."""
        found = SelectedTab.from_rank(max(0, self.rank - 1))
        return found if found is not None else self


_TAB_BODIES = {
    SelectedTab.TAB_1: "No messages yet. Press e to start typing.",
    SelectedTab.TAB_2: "Welcome to the tabline tabs example!",
    SelectedTab.TAB_3: "Look! I'm different than others!",
    SelectedTab.TAB_4: "I know, these are some basic changes. But I think you got the main idea.",
}
