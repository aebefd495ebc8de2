"""Terminal provider interface.

PUBLIC API:
  - TerminalProvider: Capability set every terminal backend implements
"""

from abc import ABC, abstractmethod
from typing import Mapping, Optional

from ..config import TerminalConfig

__all__ = ["TerminalProvider"]


class TerminalProvider(ABC):
    """Backend that hosts the companion process somewhere the user can see it.

    Each instance owns at most one companion session. Providers are chosen
    once at setup by select_provider() and then driven from one logical
    thread of control.
    """

    name: str = "base"

    @abstractmethod
    def is_available(self) -> bool:
        """Whether this backend can run in the current environment."""

    def setup(self, config: TerminalConfig) -> None:
        """Store default configuration for later operations."""
        self.config = config

    @abstractmethod
    def open(
        self,
        cmd: str,
        env: Mapping[str, str],
        config: Optional[TerminalConfig] = None,
        focus: bool = True,
    ) -> bool:
        """Open the session, or focus it if already open.

        Returns:
            True if the session is open when the call returns.
        """

    @abstractmethod
    def close(self) -> None:
        """Close the session if open."""

    @abstractmethod
    def simple_toggle(self, cmd: str, env: Mapping[str, str], config: Optional[TerminalConfig] = None) -> None:
        """Open the session if absent, close it if present."""

    @abstractmethod
    def focus_toggle(self, cmd: str, env: Mapping[str, str], config: Optional[TerminalConfig] = None) -> None:
        """Open if absent, focus if unfocused, close if focused."""

    @abstractmethod
    def is_open(self) -> bool:
        """Whether the session exists right now."""

    def get_active_handle(self) -> Optional[str]:
        """Host-native handle of the session, if the backend has one."""
        return None
