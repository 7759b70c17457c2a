"""Editing and navigation state: text buffer, modes, tabs, message log, key bindings."""

from tabline.core.text_buffer import TextCursorBuffer
from tabline.core.modes import InputMode, RunState
from tabline.core.tabs import SelectedTab
from tabline.core.message_log import MessageLog
from tabline.core.events import Key, KeyEvent, KeyEventKind
from tabline.core.shortcuts import Action, ShortcutContext, ShortcutRegistry

__all__ = [
    "TextCursorBuffer",
    "InputMode",
    "RunState",
    "SelectedTab",
    "MessageLog",
    "Key",
    "KeyEvent",
    "KeyEventKind",
    "Action",
    "ShortcutContext",
    "ShortcutRegistry",
]
