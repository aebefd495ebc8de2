"""Terminal providers and provider selection.

PUBLIC API:
  - TerminalProvider: Backend interface
  - TmuxProvider: tmux split-pane backend
  - ProcessProvider: child-process backend
  - select_provider: Pick and set up a backend for the environment
  - TerminalManager: Companion session owned by the application
"""

from .base import TerminalProvider
from .tmux import TmuxProvider
from .process import ProcessProvider
from .manager import TerminalManager, select_provider

__all__ = ["TerminalProvider", "TmuxProvider", "ProcessProvider", "select_provider", "TerminalManager"]
