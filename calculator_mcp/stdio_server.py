"""
Calculator MCP server over stdio.

Usage:
    calculator-mcp-stdio

Configuration in an MCP client:
    {
      "mcpServers": {
        "calculator": {"command": "calculator-mcp-stdio"}
      }
    }
"""

import asyncio
import logging
import sys

from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from calculator_mcp.config import ConfigurationError, configure_logging, load_settings
from calculator_mcp.mcp_server import build_server
from calculator_mcp.services.dispatcher import ToolDispatcher
from calculator_mcp.services.tool_catalog import build_default_catalog

logger = logging.getLogger(__name__)


async def serve_stdio(server: Server):
    """Run the server on stdin/stdout until the input stream closes."""
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Calculator MCP server running on stdio")
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def main() -> int:
    """
    Entry point for the stdio transport.

    Returns:
        0 on clean shutdown (including interrupt), 1 on transport failure,
        2 on invalid configuration
    """
    try:
        settings = load_settings()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    configure_logging(settings)

    catalog = build_default_catalog()
    server = build_server(catalog, ToolDispatcher(catalog), settings)

    try:
        asyncio.run(serve_stdio(server))
    except KeyboardInterrupt:
        logger.info("Interrupted, stdio transport closed")
        return 0
    except Exception as e:
        logger.error(f"MCP stdio transport failed: {e}", exc_info=True)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
