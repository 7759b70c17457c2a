"""Core TUI infrastructure - terminal I/O and keyboard input."""

from tabline.cli.core.terminal import Terminal, TerminalSize
from tabline.cli.core.input import InputReader

__all__ = [
    "Terminal",
    "TerminalSize",
    "InputReader",
]
