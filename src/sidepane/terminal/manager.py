"""Companion session manager and provider selection.

PUBLIC API:
  - select_provider: Pick and set up a backend for the environment
  - TerminalManager: Builds the companion command and drives one provider
"""

import logging
import shlex
from pathlib import Path
from typing import Any, Mapping, Optional

from ..config import TerminalConfig
from .base import TerminalProvider
from .process import ProcessProvider
from .tmux import TmuxProvider

__all__ = ["select_provider", "TerminalManager"]

logger = logging.getLogger(__name__)

SELECTION_STORE_ENV = "SIDEPANE_SELECTION_STORE"


def select_provider(config: TerminalConfig) -> TerminalProvider:
    """Choose a backend once, based on config and environment detection.

    "auto" prefers tmux when running inside it. An explicit "tmux" outside
    tmux falls back to the process backend with a warning.
    """
    provider: TerminalProvider
    if config.provider == "process":
        provider = ProcessProvider()
    else:
        tmux = TmuxProvider()
        if tmux.is_available():
            provider = tmux
        else:
            if config.provider == "tmux":
                logger.warning("tmux provider requested but not running inside tmux, using process provider")
            provider = ProcessProvider()

    provider.setup(config)
    logger.debug(f"Selected terminal provider: {provider.name}")
    return provider


class TerminalManager:
    """Owns the companion session for the lifetime of the application.

    The provider (and with it the cached session state) is created once here
    and passed around explicitly. Nothing is torn down on exit: a tmux pane
    outlives this process.
    """

    def __init__(
        self,
        config: TerminalConfig,
        provider: Optional[TerminalProvider] = None,
        selection_store: Optional[Path] = None,
    ):
        self.config = config
        self.selection_store = selection_store
        if provider is None:
            provider = select_provider(config)
        else:
            provider.setup(config)
        self.provider = provider

    @property
    def command(self) -> str:
        """Companion command line."""
        return shlex.join([self.config.command, *self.config.args])

    def build_env(self, extra: Optional[Mapping[str, str]] = None) -> dict[str, str]:
        """Environment for the companion: config env, store path, overrides."""
        env = dict(self.config.env)
        if self.selection_store is not None:
            env[SELECTION_STORE_ENV] = str(self.selection_store)
        env.update(extra or {})
        return env

    def open(self, focus: bool = True, env: Optional[Mapping[str, str]] = None) -> bool:
        return self.provider.open(self.command, self.build_env(env), self.config, focus)

    def close(self) -> None:
        self.provider.close()

    def toggle(self, env: Optional[Mapping[str, str]] = None) -> None:
        self.provider.simple_toggle(self.command, self.build_env(env), self.config)

    def focus_toggle(self, env: Optional[Mapping[str, str]] = None) -> None:
        self.provider.focus_toggle(self.command, self.build_env(env), self.config)

    def status(self) -> dict[str, Any]:
        """Snapshot of the session as seen right now."""
        status: dict[str, Any] = {
            "provider": self.provider.name,
            "open": self.provider.is_open(),
            "command": self.command,
            "handle": self.provider.get_active_handle(),
        }
        if isinstance(self.provider, TmuxProvider):
            status["pane"] = self.provider.pane_id
        return status
