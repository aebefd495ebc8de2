"""Terminal provider for tmux split panes.

The pane lives on the tmux server, not in this process. The user can close it,
the companion can exit, or another tool can kill it at any moment, so the
cached pane ID is only a belief. Every operation re-checks it with
pane_exists() before acting on it.

PUBLIC API:
  - TmuxProvider: Manages one companion pane in the current tmux session
"""

import logging
import threading
from typing import Mapping, Optional

from ..config import TerminalConfig
from ..tmux import (
    PaneCreateError,
    TmuxError,
    create_pane,
    focus_pane,
    get_current_pane,
    in_tmux,
    is_pane_focused,
    kill_pane,
    pane_exists,
)
from .base import TerminalProvider

__all__ = ["TmuxProvider"]

logger = logging.getLogger(__name__)


class TmuxProvider(TerminalProvider):
    """Companion session hosted in a tmux split pane.

    Attributes:
        pane_id: Last known ID of the managed pane, or None when closed.
        config: Default terminal configuration from setup().
    """

    name = "tmux"

    def __init__(self, config: Optional[TerminalConfig] = None):
        self.pane_id: Optional[str] = None
        self.config = config or TerminalConfig()
        # Serializes probe -> act -> update against concurrent tool calls
        self._lock = threading.RLock()

    def is_available(self) -> bool:
        return in_tmux()

    def _live_pane(self) -> Optional[str]:
        """Re-validate the cached pane ID, forgetting it if tmux lost it."""
        if self.pane_id is None:
            return None
        if pane_exists(self.pane_id):
            return self.pane_id

        logger.debug(f"Pane {self.pane_id} closed outside sidepane, forgetting it")
        self.pane_id = None
        return None

    def is_open(self) -> bool:
        with self._lock:
            return self._live_pane() is not None

    def open(
        self,
        cmd: str,
        env: Mapping[str, str],
        config: Optional[TerminalConfig] = None,
        focus: bool = True,
    ) -> bool:
        """Open the companion pane, or focus the existing one.

        Args:
            cmd: Command line to run in the pane.
            env: Environment variables injected into the pane.
            config: Geometry overrides. Defaults to the setup() config.
            focus: Leave focus on the pane. When False, focus returns to
                the pane that had it before the split.

        Returns:
            True if a pane is open afterwards, False if creation failed.

        Raises:
            TmuxLaunchError: If tmux cannot be launched.
        """
        with self._lock:
            pane_id = self._live_pane()
            if pane_id:
                if focus:
                    focus_pane(pane_id)
                return True

            original_pane_id = get_current_pane()
            request = (config or self.config).pane_request(cmd, env)

            try:
                new_pane_id = create_pane(request)
            except PaneCreateError as e:
                logger.error(f"Failed to create tmux pane: {e.argv} Error: {e.stderr.strip() or 'unknown'}")
                return False

            self.pane_id = new_pane_id

            # split-window moves focus to the new pane
            if not focus and original_pane_id:
                focus_pane(original_pane_id)
            return True

    def close(self) -> None:
        """Kill the managed pane if it still exists, then forget it."""
        with self._lock:
            if self.pane_id is None:
                return
            kill_pane(self.pane_id)
            self.pane_id = None

    def simple_toggle(self, cmd: str, env: Mapping[str, str], config: Optional[TerminalConfig] = None) -> None:
        """Show or hide the pane, regardless of focus."""
        with self._lock:
            try:
                if self._live_pane():
                    self.close()
                else:
                    self.open(cmd, env, config, focus=True)
            except TmuxError as e:
                logger.error(f"Toggle failed: {e}")

    def focus_toggle(self, cmd: str, env: Mapping[str, str], config: Optional[TerminalConfig] = None) -> None:
        """Smart toggle: hide if focused, focus if visible, open if absent.

        A pane that merely lost focus is refocused, never recreated.
        """
        with self._lock:
            try:
                pane_id = self._live_pane()
                if pane_id is None:
                    self.open(cmd, env, config, focus=True)
                elif is_pane_focused(pane_id):
                    self.close()
                else:
                    focus_pane(pane_id)
            except TmuxError as e:
                logger.error(f"Focus toggle failed: {e}")

    def get_active_handle(self) -> Optional[str]:
        """Always None: tmux panes have no host-native handle."""
        return None
