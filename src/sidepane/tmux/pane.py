"""Pane operations - create, focus, and kill tmux panes."""

import logging
import os
from dataclasses import dataclass, field
from typing import List, Literal, Mapping, Optional

from .core import run_tmux, pane_exists
from .exceptions import PaneCreateError, TmuxLaunchError

logger = logging.getLogger(__name__)

type SplitDirection = Literal["horizontal", "vertical"]
type Placement = Literal["before", "after"]


@dataclass(frozen=True)
class PaneRequest:
    """Geometry, placement, and launch details for a new pane."""

    command: str
    direction: SplitDirection = "horizontal"
    size: str = "30%"  # "30%" or absolute cells like "80"
    placement: Placement = "after"
    env: Mapping[str, str] = field(default_factory=dict)
    cwd: Optional[str] = None  # None pins os.getcwd() at build time

    def build_args(self) -> List[str]:
        """Build the split-window argument list (without leading "tmux")."""
        args = ["split-window", "-P", "-F", "#{pane_id}"]
        args.append("-v" if self.direction == "vertical" else "-h")
        args.extend(["-l", self.size])

        if self.placement == "before":
            args.append("-b")

        args.extend(build_env_flags(self.env))
        args.extend(["-c", self.cwd or os.getcwd()])
        args.append(self.command)
        return args


def build_env_flags(env: Optional[Mapping[str, str]]) -> List[str]:
    """Build one "-e KEY=VALUE" pair per environment entry."""
    flags = []
    for key, value in (env or {}).items():
        flags.extend(["-e", f"{key}={value}"])
    return flags


def create_pane(request: PaneRequest) -> str:
    """Split a new pane and return its ID as printed by tmux.

    Args:
        request: Pane geometry, environment, and command

    Returns:
        The new pane ID (e.g., "%42")

    Raises:
        PaneCreateError: If tmux exits non-zero or prints no pane ID
        TmuxLaunchError: If tmux cannot be launched
    """
    args = request.build_args()
    logger.debug(f"Opening tmux pane with args: {args}")

    code, stdout, stderr = run_tmux(args)
    pane_id = stdout.strip()
    if code != 0 or not pane_id:
        raise PaneCreateError(["tmux"] + args, code, stderr)

    logger.debug(f"Created tmux pane: {pane_id}")
    return pane_id


def focus_pane(pane_id: str) -> bool:
    """Select a pane. Best-effort: failures are logged, never raised.

    Returns:
        True if tmux selected the pane
    """
    try:
        code, _, stderr = run_tmux(["select-pane", "-t", pane_id])
    except TmuxLaunchError as e:
        logger.warning(f"Failed to focus pane {pane_id}: {e}")
        return False

    if code != 0:
        logger.warning(f"Failed to focus pane {pane_id}: {stderr.strip()}")
        return False
    return True


def kill_pane(pane_id: str) -> bool:
    """Kill a pane if it still exists.

    A pane that is already gone is a silent no-op.

    Returns:
        True if a kill was issued and succeeded
    """
    if not pane_exists(pane_id):
        return False

    try:
        code, _, stderr = run_tmux(["kill-pane", "-t", pane_id])
    except TmuxLaunchError as e:
        logger.warning(f"Failed to kill pane {pane_id}: {e}")
        return False

    if code != 0:
        logger.warning(f"Failed to kill pane {pane_id}: {stderr.strip()}")
        return False
    return True
