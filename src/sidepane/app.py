"""sidepane ReplKit2 application.

Dual REPL/MCP entry point. Terminal commands drive the companion pane; the
selection commands let the editor record selections and the companion read
them back.
"""

from dataclasses import dataclass, field

from replkit2 import App

from .config import ConfigManager, get_config_manager
from .selection import SelectionStore
from .terminal import TerminalManager


@dataclass
class SidepaneState:
    """Application state for sidepane.

    Built once at startup: the terminal provider is selected here and keeps
    the companion session for the lifetime of the app.

    Attributes:
        config: Loaded configuration.
        selections: Selection history store.
        terminal: Companion session manager.
    """

    config: ConfigManager = field(default_factory=get_config_manager)
    selections: SelectionStore = field(init=False)
    terminal: TerminalManager = field(init=False)

    def __post_init__(self):
        selection = self.config.selection
        self.selections = SelectionStore(selection.store_path, history_size=selection.history_size)
        self.terminal = TerminalManager(self.config.terminal, selection_store=self.selections.path)


# Must be created before command imports for decorator registration
app = App(
    "sidepane",
    SidepaneState,
    uri_scheme="sidepane",
    fastmcp={
        "description": "Companion terminal pane and editor selection tools",
        "tags": {"terminal", "tmux", "editor"},
    },
)


# Command imports trigger @app.command decorator registration
from .commands import terminal  # noqa: E402, F401
from .commands import selection  # noqa: E402, F401
