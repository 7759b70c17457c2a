"""
tabline: tabbed terminal UI with an editable input line and a message log.

Quick Start:
    $ tabline run
    $ tabline keys

Library use:
    >>> from tabline import AppController
    >>> from tabline.core.events import KeyEvent
    >>> app = AppController()
    >>> app.handle_event(KeyEvent.of_char("e"))
    True
    >>> for ch in "hi":
    ...     app.handle_event(KeyEvent.of_char(ch))
    ...
    True
    True
    >>> app.buffer.content
    'hi'
"""

__version__ = "0.1.0"

# Core types
from tabline.core.controller import AppController, Snapshot
from tabline.core.message_log import MessageLog
from tabline.core.modes import InputMode, RunState
from tabline.core.tabs import SelectedTab
from tabline.core.text_buffer import TextCursorBuffer

__all__ = [
    # Version
    "__version__",
    # Core types
    "AppController",
    "Snapshot",
    "MessageLog",
    "InputMode",
    "RunState",
    "SelectedTab",
    "TextCursorBuffer",
]
