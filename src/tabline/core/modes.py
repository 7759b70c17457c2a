"""Application run state and input mode."""

from enum import Enum, auto


class RunState(Enum):
    """Whether the event loop should keep going."""
    RUNNING = auto()
    QUITTING = auto()  # Terminal state


class InputMode(Enum):
    """Determines how key events are routed."""
    NORMAL = auto()   # Keys are commands (tabs, quit, edit)
    EDITING = auto()  # Keys edit the input line

    @property
    def label(self) -> str:
        return self.name.capitalize()
