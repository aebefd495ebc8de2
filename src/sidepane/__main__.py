"""Companion terminal pane manager.

Entry point for sidepane that can run as either a REPL interface or MCP
server depending on command line arguments.
"""

import logging
import os
import sys


def main():
    """Run sidepane as REPL or MCP server based on command line arguments.

    Checks for --mcp flag to determine mode:
    - With --mcp: Runs as MCP server for the companion
    - Without --mcp: Runs as interactive REPL
    """
    logging.basicConfig(
        level=getattr(logging, os.environ.get("SIDEPANE_LOG_LEVEL", "INFO").upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    from .app import app

    if "--mcp" in sys.argv:
        app.mcp.run()
    else:
        app.run(title="sidepane - Companion Terminal")


if __name__ == "__main__":
    main()
