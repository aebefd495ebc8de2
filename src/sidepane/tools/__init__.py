"""Tool surface answering editor-state queries for the companion.

Each tool is a name, a JSON schema, and a handler taking the selection store
and the call parameters. Handlers return MCP content dicts and signal
failures with ToolError.

PUBLIC API:
  - Tool: Registered tool definition
  - get_tool: Look up a tool by name
  - list_tools: All registered tools
  - call_tool: Dispatch a call by name
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from ..errors import METHOD_NOT_FOUND, ToolError
from ..selection import SelectionStore

__all__ = ["Tool", "get_tool", "list_tools", "call_tool"]

type ToolHandler = Callable[[SelectionStore, dict[str, Any]], dict[str, Any]]


@dataclass(frozen=True)
class Tool:
    name: str
    schema: dict[str, Any]
    handler: ToolHandler


_TOOLS: dict[str, Tool] = {}


def register(tool: Tool) -> Tool:
    _TOOLS[tool.name] = tool
    return tool


def get_tool(name: str) -> Optional[Tool]:
    return _TOOLS.get(name)


def list_tools() -> list[Tool]:
    return list(_TOOLS.values())


def call_tool(name: str, store: SelectionStore, params: Optional[dict[str, Any]] = None) -> dict[str, Any]:
    """Invoke a registered tool.

    Raises:
        ToolError: Unknown tool, or the handler's own failure
    """
    tool = get_tool(name)
    if tool is None:
        raise ToolError(METHOD_NOT_FOUND, "Method not found", f"Unknown tool: {name}")
    return tool.handler(store, params or {})


# Tool imports trigger registration
from . import get_latest_selection  # noqa: E402, F401
