"""Centralized keyboard shortcut registry.

This module provides a single source of truth for the key bindings of
each input mode. Bindings are defined with keys, labels, descriptions and
the action they trigger, so the same table drives dispatch, the status
bar hints and the ``tabline keys`` help listing.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from tabline.core.events import Key, KeyEvent
from tabline.core.modes import InputMode


class ShortcutContext(Enum):
    """Input mode in which a shortcut is active."""
    NORMAL = auto()
    EDITING = auto()

    @classmethod
    def for_mode(cls, mode: InputMode) -> ShortcutContext:
        if mode == InputMode.EDITING:
            return cls.EDITING
        return cls.NORMAL


class Action(Enum):
    """Every command the application controller can perform."""
    ENTER_EDITING = auto()
    LEAVE_EDITING = auto()
    QUIT = auto()
    NEXT_TAB = auto()
    PREVIOUS_TAB = auto()
    COMMIT = auto()
    DELETE_BEFORE_CURSOR = auto()
    CURSOR_LEFT = auto()
    CURSOR_RIGHT = auto()


@dataclass
class ShortcutDef:
    """Definition of a keyboard shortcut.

    Attributes:
        keys: Keys/chars that trigger this shortcut
        label: Short label for the status bar (e.g., "Quit")
        description: Longer description for the help listing
        context: Mode in which the shortcut is active
        action: Action performed when the shortcut matches
        show_in_status: Whether the status bar lists this shortcut
    """
    keys: list[str | Key]
    label: str
    description: str
    context: ShortcutContext
    action: Action
    show_in_status: bool = True

    def matches(self, event: KeyEvent) -> bool:
        """Check if a key event matches this shortcut."""
        for key in self.keys:
            if isinstance(key, Key):
                if event.key == key:
                    return True
            elif event.is_char and event.char == key:
                return True
        return False

    @property
    def key_display(self) -> str:
        """Get display string for the keys."""
        return "/".join(
            key_to_display(key) if isinstance(key, Key) else key
            for key in self.keys
        )


def key_to_display(key: Key) -> str:
    """Convert a Key enum to display string."""
    display_map = {
        Key.UP: "↑",
        Key.DOWN: "↓",
        Key.LEFT: "←",
        Key.RIGHT: "→",
        Key.ENTER: "Enter",
        Key.ESCAPE: "Esc",
        Key.TAB: "Tab",
        Key.BACKSPACE: "Bksp",
        Key.HOME: "Home",
        Key.END: "End",
        Key.DELETE: "Del",
    }
    return display_map.get(key, key.name)


class ShortcutRegistry:
    """Registry of key bindings grouped by input mode.

    Example:
        registry = ShortcutRegistry()
        registry.register(ShortcutDef(
            keys=["q", Key.ESCAPE],
            label="Quit",
            description="Quit the application",
            context=ShortcutContext.NORMAL,
            action=Action.QUIT,
        ))

        shortcut = registry.match(event, ShortcutContext.NORMAL)
        if shortcut:
            controller.perform(shortcut.action)
    """

    def __init__(self) -> None:
        self._by_context: dict[ShortcutContext, list[ShortcutDef]] = {
            ctx: [] for ctx in ShortcutContext
        }

    def register(self, shortcut: ShortcutDef) -> None:
        self._by_context[shortcut.context].append(shortcut)

    def register_many(self, shortcuts: list[ShortcutDef]) -> None:
        for shortcut in shortcuts:
            self.register(shortcut)

    def match(self, event: KeyEvent, context: ShortcutContext) -> Optional[ShortcutDef]:
        """Find the first shortcut in context matching the event."""
        for shortcut in self._by_context[context]:
            if shortcut.matches(event):
                return shortcut
        return None

    def get_for_context(self, context: ShortcutContext) -> list[ShortcutDef]:
        return list(self._by_context[context])

    def get_status_bar_hints(self, context: ShortcutContext) -> list[tuple[str, str]]:
        """Get (key_display, label) pairs for the status bar."""
        return [
            (shortcut.key_display, shortcut.label)
            for shortcut in self._by_context[context]
            if shortcut.show_in_status
        ]


def _build_default_registry() -> ShortcutRegistry:
    registry = ShortcutRegistry()
    registry.register_many([
        # Normal mode
        ShortcutDef(
            keys=["e"],
            label="Edit",
            description="Start editing the input line",
            context=ShortcutContext.NORMAL,
            action=Action.ENTER_EDITING,
        ),
        ShortcutDef(
            keys=["l", Key.RIGHT],
            label="Next tab",
            description="Select the tab to the right",
            context=ShortcutContext.NORMAL,
            action=Action.NEXT_TAB,
        ),
        ShortcutDef(
            keys=["h", Key.LEFT],
            label="Prev tab",
            description="Select the tab to the left",
            context=ShortcutContext.NORMAL,
            action=Action.PREVIOUS_TAB,
        ),
        ShortcutDef(
            keys=["q", Key.ESCAPE],
            label="Quit",
            description="Quit the application",
            context=ShortcutContext.NORMAL,
            action=Action.QUIT,
        ),
        # Editing mode
        ShortcutDef(
            keys=[Key.ENTER],
            label="Post",
            description="Add the input line to the messages",
            context=ShortcutContext.EDITING,
            action=Action.COMMIT,
        ),
        ShortcutDef(
            keys=[Key.BACKSPACE],
            label="Delete",
            description="Delete the character before the cursor",
            context=ShortcutContext.EDITING,
            action=Action.DELETE_BEFORE_CURSOR,
            show_in_status=False,
        ),
        ShortcutDef(
            keys=[Key.LEFT],
            label="Left",
            description="Move the cursor left",
            context=ShortcutContext.EDITING,
            action=Action.CURSOR_LEFT,
            show_in_status=False,
        ),
        ShortcutDef(
            keys=[Key.RIGHT],
            label="Right",
            description="Move the cursor right",
            context=ShortcutContext.EDITING,
            action=Action.CURSOR_RIGHT,
            show_in_status=False,
        ),
        ShortcutDef(
            keys=[Key.ESCAPE],
            label="Normal",
            description="Stop editing",
            context=ShortcutContext.EDITING,
            action=Action.LEAVE_EDITING,
        ),
    ])
    return registry


# Global registry instance
_registry: Optional[ShortcutRegistry] = None


def get_shortcut_registry() -> ShortcutRegistry:
    """Get the global shortcut registry (lazily built)."""
    global _registry
    if _registry is None:
        _registry = _build_default_registry()
    return _registry
