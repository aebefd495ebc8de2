"""Companion terminal pane manager with editor selection tools.

Runs an assistant's companion process in a tmux split next to the editor,
keeps track of that pane even when the user closes or refocuses it behind
our back, and serves the latest editor selection to the companion. Built on
ReplKit2 for dual REPL/MCP functionality.

PUBLIC API:
  - app: ReplKit2 application instance with sidepane commands
"""

from .app import app

__version__ = "0.1.0"
__all__ = ["app"]
