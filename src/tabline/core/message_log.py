"""Append-only log of committed input lines."""

from __future__ import annotations

from typing import Iterator


class MessageLog:
    """Ordered history of committed messages. Entries are never edited or removed."""

    def __init__(self) -> None:
        self._lines: list[str] = []

    def append(self, line: str) -> None:
        self._lines.append(line)

    @property
    def lines(self) -> tuple[str, ...]:
        """Immutable copy of the log, oldest first."""
        return tuple(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self._lines)
