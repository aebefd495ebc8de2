"""Configuration management for sidepane.

Handles terminal and selection settings from sidepane.toml.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional
import os
import tomllib

from .tmux.pane import PaneRequest


class ConfigError(ValueError):
    """Raised when a configuration value is invalid."""

    pass


PROVIDERS = ("auto", "tmux", "process")
_DIRECTIONS = {"horizontal": "horizontal", "h": "horizontal", "vertical": "vertical", "v": "vertical"}
_PLACEMENTS = ("before", "after")


def _validate_size(size: str) -> str:
    value = size[:-1] if size.endswith("%") else size
    if not value.isdigit() or int(value) <= 0:
        raise ConfigError(f"Invalid pane_size: {size!r} (use e.g. '30%' or '80')")
    if size.endswith("%") and int(value) > 100:
        raise ConfigError(f"Invalid pane_size: {size!r} (percentage above 100)")
    return size


@dataclass
class TerminalConfig:
    """Settings for the companion terminal.

    Attributes:
        provider: Backend name - "auto", "tmux", or "process".
        split_direction: "horizontal" (side by side) or "vertical" (stacked).
        pane_size: Percentage ("30%") or absolute cells ("80").
        placement: "before" or "after" the current pane.
        command: Companion executable.
        args: Extra arguments appended to command.
        cwd: Working directory for the companion. None uses os.getcwd().
        env: Environment variables injected into the companion.
    """

    provider: str = "auto"
    split_direction: str = "horizontal"
    pane_size: str = "30%"
    placement: str = "after"
    command: str = "claude"
    args: list[str] = field(default_factory=list)
    cwd: Optional[str] = None
    env: dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        if self.provider not in PROVIDERS:
            raise ConfigError(f"Unknown terminal provider: {self.provider!r}")

        direction = _DIRECTIONS.get(str(self.split_direction).lower())
        if direction is None:
            raise ConfigError(f"Invalid split_direction: {self.split_direction!r}")
        self.split_direction = direction

        if self.placement not in _PLACEMENTS:
            raise ConfigError(f"Invalid placement: {self.placement!r}")

        self.pane_size = _validate_size(str(self.pane_size).strip())
        self.env = {str(k): str(v) for k, v in self.env.items()}
        self.args = [str(a) for a in self.args]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TerminalConfig":
        """Build from a [terminal] table, ignoring unknown keys."""
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        if "env" in known and not isinstance(known["env"], dict):
            raise ConfigError("terminal.env must be a table")
        if "args" in known and not isinstance(known["args"], list):
            raise ConfigError("terminal.args must be a list")
        if known.get("cwd") == "":
            known["cwd"] = None
        return cls(**known)

    def pane_request(self, command: str, env: dict[str, str]) -> PaneRequest:
        """Build a fresh PaneRequest for one open."""
        return PaneRequest(
            command=command,
            direction=self.split_direction,
            size=self.pane_size,
            placement=self.placement,
            env=dict(env),
            cwd=self.cwd or os.getcwd(),
        )


@dataclass
class SelectionConfig:
    """Settings for the selection history store."""

    store: Optional[Path] = None
    history_size: int = 50

    def __post_init__(self):
        if self.store is not None:
            self.store = Path(self.store).expanduser()
        if not isinstance(self.history_size, int) or self.history_size < 1:
            raise ConfigError(f"Invalid history_size: {self.history_size!r}")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SelectionConfig":
        store = data.get("store") or None
        return cls(store=store, history_size=data.get("history_size", 50))

    @property
    def store_path(self) -> Path:
        """Store path, defaulting to ~/.cache/sidepane/selections.json."""
        if self.store is not None:
            return self.store
        return Path.home() / ".cache" / "sidepane" / "selections.json"


def _find_config_file() -> Optional[Path]:
    """Find sidepane.toml via SIDEPANE_CONFIG or current/parent directories."""
    explicit = os.environ.get("SIDEPANE_CONFIG")
    if explicit:
        return Path(explicit).expanduser()

    current = Path.cwd()

    for parent in [current] + list(current.parents):
        config_file = parent / "sidepane.toml"
        if config_file.exists():
            return config_file

    return None


def _load_config(path: Optional[Path] = None) -> dict:
    """Load raw configuration from file."""
    if path is None:
        path = _find_config_file()

    if path is None or not path.exists():
        return {}

    with open(path, "rb") as f:
        try:
            return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid config file {path}: {e}") from e


class ConfigManager:
    """Manages configuration for sidepane."""

    def __init__(self, path: Optional[Path] = None):
        self.path = path or _find_config_file()
        self.data = _load_config(self.path)
        self.terminal = TerminalConfig.from_dict(self.data.get("terminal", {}))
        self.selection = SelectionConfig.from_dict(self.data.get("selection", {}))


# Global instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get or create the global config manager."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager
