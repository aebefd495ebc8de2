"""Shared error handling utilities for sidepane.

Tool handlers raise ToolError with JSON-RPC style codes. App commands turn
failures into display responses instead of raising.

PUBLIC API:
  - ToolError: Structured tool failure (code, message, data)
  - INTERNAL_ERROR: Code for server-side failures
  - METHOD_NOT_FOUND: Code for unknown tools
  - markdown_error_response: Create error response for markdown display
"""

from typing import Any, Optional

INTERNAL_ERROR = -32000
METHOD_NOT_FOUND = -32601


class ToolError(Exception):
    """Failure raised by a tool handler."""

    def __init__(self, code: int, message: str, data: Optional[Any] = None):
        self.code = code
        self.message = message
        self.data = data
        super().__init__(f"{message}: {data}" if data is not None else message)

    def to_dict(self) -> dict[str, Any]:
        error: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.data is not None:
            error["data"] = self.data
        return error


def markdown_error_response(message: str) -> dict[str, Any]:
    """Create error response for markdown display commands.

    Args:
        message: The error message to display

    Returns:
        Markdown display dict with error element
    """
    return {
        "elements": [{"type": "text", "content": f"Error: {message}"}],
        "frontmatter": {"error": message, "status": "error"},
    }

