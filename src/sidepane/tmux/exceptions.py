"""Tmux-specific exceptions.

PUBLIC API:
  - TmuxError: Base exception for all tmux operations
  - TmuxLaunchError: tmux executable could not be started
  - PaneCreateError: split-window failed or printed no pane ID
"""


class TmuxError(Exception):
    """Base exception for all tmux operations."""

    pass


class TmuxLaunchError(TmuxError):
    """Raised when the tmux executable cannot be launched at all."""

    def __init__(self, argv: list[str], reason: str):
        self.argv = argv
        self.reason = reason
        super().__init__(f"Failed to launch {argv[0] if argv else 'command'}: {reason}")


class PaneCreateError(TmuxError):
    """Raised when tmux could not create a pane or did not report its ID."""

    def __init__(self, argv: list[str], code: int, stderr: str):
        self.argv = argv
        self.code = code
        self.stderr = stderr
        detail = stderr.strip() or "no pane ID in output"
        super().__init__(f"Failed to create tmux pane (exit {code}): {detail}")
