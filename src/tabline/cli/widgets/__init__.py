"""TUI widgets. Each renders itself as a list of ANSI-escaped lines."""

from tabline.cli.widgets.base import BaseWidget, Rect, boxed
from tabline.cli.widgets.input_box import InputBoxWidget
from tabline.cli.widgets.message_list import MessageListWidget
from tabline.cli.widgets.status_bar import StatusBarWidget, Shortcut
from tabline.cli.widgets.tab_bar import TabBarWidget
from tabline.cli.widgets.tab_pane import TabPaneWidget

__all__ = [
    "BaseWidget",
    "Rect",
    "boxed",
    "InputBoxWidget",
    "MessageListWidget",
    "StatusBarWidget",
    "Shortcut",
    "TabBarWidget",
    "TabPaneWidget",
]
