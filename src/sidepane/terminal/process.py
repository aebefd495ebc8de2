"""Terminal provider that runs the companion as a child process.

Used when sidepane is not running inside tmux. The process belongs to this
host, so the only drift to track is the companion exiting on its own.

PUBLIC API:
  - ProcessProvider: Runs one companion process in the background
"""

import logging
import os
import shlex
import subprocess
import threading
from typing import Mapping, Optional

from ..config import TerminalConfig
from .base import TerminalProvider

__all__ = ["ProcessProvider"]

logger = logging.getLogger(__name__)


class ProcessProvider(TerminalProvider):
    """Companion session hosted as a detached child process."""

    name = "process"

    def __init__(self, config: Optional[TerminalConfig] = None, terminate_timeout: float = 3.0):
        self.process: Optional[subprocess.Popen] = None
        self.config = config or TerminalConfig()
        self.terminate_timeout = terminate_timeout
        self._lock = threading.RLock()

    def is_available(self) -> bool:
        return True

    def _live_process(self) -> Optional[subprocess.Popen]:
        if self.process is None:
            return None
        code = self.process.poll()
        if code is None:
            return self.process

        logger.debug(f"Companion process {self.process.pid} exited with code {code}")
        self.process = None
        return None

    def is_open(self) -> bool:
        with self._lock:
            return self._live_process() is not None

    def open(
        self,
        cmd: str,
        env: Mapping[str, str],
        config: Optional[TerminalConfig] = None,
        focus: bool = True,
    ) -> bool:
        """Start the companion unless it is already running.

        focus has no meaning for a background process and is ignored.
        """
        with self._lock:
            if self._live_process():
                return True

            config = config or self.config
            cwd = config.cwd or os.getcwd()
            logger.debug(f"Starting companion process: {cmd!r} in {cwd}")

            try:
                argv = shlex.split(cmd)
                self.process = subprocess.Popen(
                    argv,
                    env={**os.environ, **env},
                    cwd=cwd,
                    stdin=subprocess.DEVNULL,
                    stdout=subprocess.DEVNULL,
                    stderr=subprocess.DEVNULL,
                    start_new_session=True,
                )
            except (OSError, ValueError) as e:
                logger.error(f"Failed to start companion process {cmd!r}: {e}")
                return False
            return True

    def close(self) -> None:
        """Terminate the companion, escalating to kill after the grace period."""
        with self._lock:
            process = self._live_process()
            self.process = None
            if process is None:
                return

            process.terminate()
            try:
                process.wait(timeout=self.terminate_timeout)
            except subprocess.TimeoutExpired:
                logger.warning(f"Companion process {process.pid} ignored SIGTERM, killing")
                process.kill()
                process.wait()

    def simple_toggle(self, cmd: str, env: Mapping[str, str], config: Optional[TerminalConfig] = None) -> None:
        with self._lock:
            if self._live_process():
                self.close()
            else:
                self.open(cmd, env, config, focus=True)

    def focus_toggle(self, cmd: str, env: Mapping[str, str], config: Optional[TerminalConfig] = None) -> None:
        # A background process is never "focused", so this reduces to a toggle
        self.simple_toggle(cmd, env, config)

    def get_active_handle(self) -> Optional[str]:
        """PID of the running companion, as a string."""
        with self._lock:
            process = self._live_process()
            return str(process.pid) if process else None
