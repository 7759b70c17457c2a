"""Key event types shared by the controller and the terminal reader."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class Key(Enum):
    """Named key constants."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ENTER = auto()
    ESCAPE = auto()
    TAB = auto()
    BACKSPACE = auto()
    HOME = auto()
    END = auto()
    DELETE = auto()


class KeyEventKind(Enum):
    """Whether the key went down, auto-repeated, or came up."""
    PRESS = auto()
    REPEAT = auto()
    RELEASE = auto()


@dataclass(frozen=True)
class KeyEvent:
    """Represents a keyboard input event."""
    key: Optional[Key] = None  # Named key if recognized
    char: Optional[str] = None  # Character if printable
    kind: KeyEventKind = KeyEventKind.PRESS
    raw: str = ""  # Raw escape sequence
    alt: bool = False  # Character was typed with Alt held

    @property
    def is_char(self) -> bool:
        """Check if this is a printable character."""
        return self.char is not None and self.key is None

    @property
    def is_press(self) -> bool:
        return self.kind == KeyEventKind.PRESS

    @classmethod
    def of_char(cls, char: str, kind: KeyEventKind = KeyEventKind.PRESS, alt: bool = False) -> KeyEvent:
        raw = '\x1b' + char if alt else char
        return cls(char=char, kind=kind, raw=raw, alt=alt)

    @classmethod
    def of_key(cls, key: Key, kind: KeyEventKind = KeyEventKind.PRESS) -> KeyEvent:
        return cls(key=key, kind=kind)
