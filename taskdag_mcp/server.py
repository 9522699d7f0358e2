"""FastMCP server initialization for Taskdag MCP."""

import logging
import sys

from mcp.server.fastmcp import FastMCP

from taskdag_mcp.config import Settings

# Initialize the MCP server
mcp = FastMCP("taskdag_mcp")


def setup_logging(level: str = "WARNING") -> None:
    """Send log records to stderr; stdout carries the MCP stdio protocol."""
    fmt = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"
    logging.basicConfig(level=level, format=fmt, datefmt="%H:%M:%S", stream=sys.stderr)


def run() -> None:
    """Run the MCP server."""
    settings = Settings.from_env()
    setup_logging(settings.log_level)

    mcp.run()


if __name__ == "__main__":
    run()
