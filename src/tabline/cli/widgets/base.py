"""Base widget class and border drawing."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from tabline.cli.core.ansi_text import truncate, truncate_and_pad, visible_len


@dataclass
class Rect:
    """Rectangle bounds for widget positioning."""
    x: int
    y: int
    width: int
    height: int


class BaseWidget(ABC):
    """Base class with common widget functionality."""

    @abstractmethod
    def render(self, bounds: Rect) -> list[str]:
        """Subclasses must implement rendering."""
        pass


def boxed(inner: list[str], bounds: Rect, title: str = "", color: str = "") -> list[str]:
    """
    Surround content lines with a single-line border.

    The result has exactly bounds.height lines of bounds.width cells.
    ``color`` is an SGR parameter string applied to the border.
    """
    if bounds.width < 2 or bounds.height < 2:
        return [" " * max(0, bounds.width)] * max(0, bounds.height)

    inner_width = bounds.width - 2
    start = f"\x1b[{color}m" if color else ""
    end = "\x1b[0m" if color else ""

    label = truncate(title, inner_width, reset=False)
    top = "┌" + label + "─" * (inner_width - visible_len(label)) + "┐"
    bottom = "└" + "─" * inner_width + "┘"

    lines = [f"{start}{top}{end}"]
    for i in range(bounds.height - 2):
        text = inner[i] if i < len(inner) else ""
        lines.append(f"{start}│{end}{truncate_and_pad(text, inner_width)}{start}│{end}")
    lines.append(f"{start}{bottom}{end}")
    return lines
