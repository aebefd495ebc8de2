"""Pure tmux operations - shared utilities for all tmux modules.

PUBLIC API:
  - run_command: Run any command and return result
  - run_tmux: Run tmux command and return result
  - in_tmux: Check if running inside tmux
  - get_current_pane: Get focused pane ID
  - pane_exists: Check if pane is alive
  - is_pane_focused: Check if pane is alive and focused
  - PaneRequest: Geometry and launch details for a new pane
  - build_env_flags: Build -e flags for environment injection
  - create_pane: Create pane and return its ID
  - focus_pane: Select pane (best-effort)
  - kill_pane: Kill pane if it exists (best-effort)
"""

from .core import (
    run_command,
    run_tmux,
    in_tmux,
    get_current_pane,
    pane_exists,
    is_pane_focused,
)

from .pane import (
    PaneRequest,
    build_env_flags,
    create_pane,
    focus_pane,
    kill_pane,
)

from .exceptions import (
    TmuxError,
    TmuxLaunchError,
    PaneCreateError,
)

__all__ = [
    "run_command",
    "run_tmux",
    "in_tmux",
    "get_current_pane",
    "pane_exists",
    "is_pane_focused",
    "PaneRequest",
    "build_env_flags",
    "create_pane",
    "focus_pane",
    "kill_pane",
    "TmuxError",
    "TmuxLaunchError",
    "PaneCreateError",
]
