"""sidepane commands."""

from .terminal import open_terminal, close_terminal, toggle_terminal, focus_terminal, status
from .selection import get_latest_selection, record_selection

__all__ = [
    "open_terminal",
    "close_terminal",
    "toggle_terminal",
    "focus_terminal",
    "status",
    "get_latest_selection",
    "record_selection",
]
