"""Selection commands - record and read back editor selections.

PUBLIC API:
  - get_latest_selection: Most recent selection as JSON
  - record_selection: Add a selection to the history
"""

from typing import Any

from ..app import app
from ..errors import ToolError, markdown_error_response
from ..selection import Position, Selection, SelectionStoreError
from ..tools import call_tool
from ..tools.get_latest_selection import SCHEMA


@app.command(
    display="markdown",
    fastmcp={"type": "tool", "description": SCHEMA["description"]},
)
def get_latest_selection(state) -> dict[str, Any]:
    """Get the most recent text selection, even if not in the active editor.

    Returns:
        Markdown with the selection as a JSON code block. When nothing was
        recorded yet the JSON carries success=false.
    """
    try:
        result = call_tool("getLatestSelection", state.selections)
    except ToolError as e:
        return markdown_error_response(str(e))

    text = result["content"][0]["text"]
    return {
        "elements": [{"type": "code_block", "content": text, "language": "json"}],
        "frontmatter": {"tool": "getLatestSelection", "status": "ok"},
    }


@app.command(
    display="markdown",
    fastmcp={"type": "tool", "description": "Record a text selection made in the editor"},
)
def record_selection(
    state,
    file_path: str,
    text: str,
    start_line: int,
    start_character: int,
    end_line: int,
    end_character: int,
) -> dict[str, Any]:
    """Record a selection so the companion can ask for it later.

    Args:
        state: Application state.
        file_path: File containing the selection.
        text: Selected text.
        start_line: Zero-based start line.
        start_character: Zero-based start column.
        end_line: Zero-based end line.
        end_character: Zero-based end column.
    """
    selection = Selection(
        text=text,
        file_path=file_path,
        start=Position(start_line, start_character),
        end=Position(end_line, end_character),
    )
    try:
        state.selections.record(selection)
    except SelectionStoreError as e:
        return markdown_error_response(str(e))

    return {
        "elements": [{"type": "text", "content": f"Recorded selection in {file_path}"}],
        "frontmatter": {"action": "record_selection", "status": "ok"},
    }
