"""Core tmux operations - command runner and read-only probes.

Probes never cache: every call asks the tmux server again, since panes can be
closed by the user or by process exit at any time.

PUBLIC API:
  - run_command: Run any command and return (returncode, stdout, stderr)
  - run_tmux: Execute tmux command and return result
  - in_tmux: Check whether this process runs inside tmux
  - get_current_pane: Get the pane ID that currently has focus
  - pane_exists: Check whether a pane ID is still alive
  - is_pane_focused: Check whether a pane exists and has focus
"""

import logging
import os
import subprocess
from typing import List, Optional, Sequence, Tuple

from .exceptions import TmuxLaunchError

__all__ = ["run_command", "run_tmux", "in_tmux", "get_current_pane", "pane_exists", "is_pane_focused"]

logger = logging.getLogger(__name__)


def run_command(argv: Sequence[str]) -> Tuple[int, str, str]:
    """Run a command synchronously, return (returncode, stdout, stderr).

    Args:
        argv: Full command line, executable first.

    Raises:
        TmuxLaunchError: If the executable could not be started.
    """
    cmd = list(argv)
    try:
        result = subprocess.run(cmd, capture_output=True, text=True)
    except OSError as e:
        raise TmuxLaunchError(cmd, str(e)) from e
    return result.returncode, result.stdout or "", result.stderr or ""


def run_tmux(args: List[str]) -> Tuple[int, str, str]:
    """Run tmux command, return (returncode, stdout, stderr)."""
    return run_command(["tmux"] + args)


def in_tmux() -> bool:
    """Check if this process is running inside a tmux session."""
    return bool(os.environ.get("TMUX"))


def get_current_pane() -> Optional[str]:
    """Get the focused tmux pane ID.

    Returns:
        Pane ID (e.g., "%42"), or None when unknown. None does not mean
        that no pane exists.
    """
    try:
        code, stdout, _ = run_tmux(["display-message", "-p", "#{pane_id}"])
    except TmuxLaunchError as e:
        logger.debug(f"Current pane query failed: {e}")
        return None

    if code != 0:
        return None
    return stdout.strip() or None


def pane_exists(pane_id: Optional[str]) -> bool:
    """Check if a pane is still alive on any session of the tmux server.

    Args:
        pane_id: Pane ID to look for (e.g., "%42")

    Returns:
        True only if a live pane with exactly this ID is listed
    """
    if not pane_id:
        return False

    try:
        code, stdout, _ = run_tmux(["list-panes", "-a", "-F", "#{pane_id}"])
    except TmuxLaunchError as e:
        logger.debug(f"Pane listing failed: {e}")
        return False

    if code != 0:
        return False
    return any(line.strip() == pane_id for line in stdout.splitlines())


def is_pane_focused(pane_id: Optional[str]) -> bool:
    """Check if pane exists and is the pane that currently has focus."""
    if not pane_exists(pane_id):
        return False
    return get_current_pane() == pane_id
