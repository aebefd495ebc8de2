"""getLatestSelection - most recent text selection, even outside the active editor."""

import json
import logging
from typing import Any

from ..errors import INTERNAL_ERROR, ToolError
from ..selection import SelectionStore, SelectionStoreError
from . import Tool, register

logger = logging.getLogger(__name__)

NO_SELECTION_MESSAGE = "No selection available"

SCHEMA = {
    "description": "Get the most recent text selection (even if not in the active editor)",
    "inputSchema": {
        "type": "object",
        "additionalProperties": False,
        "$schema": "http://json-schema.org/draft-07/schema#",
    },
}


def _text_content(payload: dict[str, Any]) -> dict[str, Any]:
    return {"content": [{"type": "text", "text": json.dumps(payload, indent=2)}]}


def handler(store: SelectionStore, params: dict[str, Any]) -> dict[str, Any]:
    """Return the latest selection as MCP text content.

    No recorded selection is a normal result with success=false, not an error.

    Raises:
        ToolError: If the selection store cannot be loaded
    """
    try:
        selection = store.get_latest_selection()
    except SelectionStoreError as e:
        logger.error(f"getLatestSelection: {e}")
        raise ToolError(INTERNAL_ERROR, "Internal server error", "Failed to load selection store") from e

    if selection is None:
        return _text_content({"success": False, "message": NO_SELECTION_MESSAGE})

    return _text_content(selection.to_dict())


register(Tool(name="getLatestSelection", schema=SCHEMA, handler=handler))
