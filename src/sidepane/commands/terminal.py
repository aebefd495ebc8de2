"""Terminal commands - open, close, and toggle the companion pane.

PUBLIC API:
  - open_terminal: Open the companion or focus it
  - close_terminal: Close the companion
  - toggle_terminal: Show/hide the companion
  - focus_terminal: Smart toggle - open, focus, or hide
  - status: Report the companion session state
"""

from typing import Any

from ..app import app
from ..errors import markdown_error_response
from ..tmux import TmuxError


def _status_response(state, action: str) -> dict[str, Any]:
    info = state.terminal.status()
    where = info.get("pane") or info.get("handle") or "-"
    summary = f"Companion is {'open' if info['open'] else 'closed'} ({info['provider']}: {where})"
    return {
        "elements": [{"type": "text", "content": summary}],
        "frontmatter": {"action": action, "status": "ok", **info},
    }


@app.command(
    display="markdown",
    fastmcp={"type": "tool", "description": "Open the companion terminal, or focus it if already open"},
)
def open_terminal(state, focus: bool = True) -> dict[str, Any]:
    """Open the companion terminal.

    Calling this while the companion is open never creates a second one.

    Args:
        state: Application state.
        focus: Move focus to the companion. Defaults to True.

    Returns:
        Markdown formatted session status.
    """
    try:
        opened = state.terminal.open(focus=focus)
    except TmuxError as e:
        return markdown_error_response(str(e))

    if not opened:
        return markdown_error_response("Failed to open companion terminal, see log for details")
    return _status_response(state, "open")


@app.command(
    display="markdown",
    fastmcp={"type": "tool", "description": "Close the companion terminal"},
)
def close_terminal(state) -> dict[str, Any]:
    """Close the companion terminal if it is open."""
    state.terminal.close()
    return _status_response(state, "close")


@app.command(
    display="markdown",
    fastmcp={"type": "tool", "description": "Show the companion terminal if hidden, hide it if shown"},
)
def toggle_terminal(state) -> dict[str, Any]:
    """Simple toggle, independent of focus."""
    state.terminal.toggle()
    return _status_response(state, "toggle")


@app.command(
    display="markdown",
    fastmcp={"type": "tool", "description": "Open, focus, or hide the companion terminal depending on focus"},
)
def focus_terminal(state) -> dict[str, Any]:
    """Smart toggle.

    Opens the companion when absent, focuses it when it lost focus, and
    hides it when it already has focus.
    """
    state.terminal.focus_toggle()
    return _status_response(state, "focus_toggle")


@app.command(
    display="markdown",
    fastmcp={"type": "tool", "description": "Show companion terminal state"},
)
def status(state) -> dict[str, Any]:
    """Report provider, open state, and pane of the companion."""
    return _status_response(state, "status")
