"""
MCP server shared by every transport.

The stdio entry point runs it over stdin/stdout. The HTTP app runs it
behind the SDK's streamable HTTP session manager and its SSE transport.
"""

import logging
from typing import List, Optional

from mcp import types
from mcp.server.lowlevel import Server
from mcp.shared.exceptions import McpError

from calculator_mcp import __version__
from calculator_mcp.config import ServerSettings
from calculator_mcp.models.tool_schema import ToolFailure
from calculator_mcp.services.dispatcher import ToolDispatcher
from calculator_mcp.services.tool_catalog import ToolCatalog

logger = logging.getLogger(__name__)


def build_server(
    catalog: ToolCatalog,
    dispatcher: ToolDispatcher,
    settings: Optional[ServerSettings] = None,
) -> Server:
    """
    Bind the tool catalog and dispatcher to an MCP server.

    Tool failures are answered with a JSON-RPC error whose code is the
    failure's ErrorKind code and whose ``data.kind`` names the kind.

    Args:
        catalog: Tools advertised by ``tools/list``
        dispatcher: Executes ``tools/call``
        settings: Provides the advertised server name

    Returns:
        MCP server ready to run on any transport
    """
    settings = settings or ServerSettings()
    server = Server(settings.server_name, version=__version__)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return [descriptor.to_mcp_tool() for descriptor in catalog.list_tools()]

    async def call_tool(request: types.CallToolRequest) -> types.ServerResult:
        result = dispatcher.invoke(request.params.name, request.params.arguments)
        if isinstance(result, ToolFailure):
            raise McpError(result.to_error_data())
        return types.ServerResult(
            types.CallToolResult(
                content=[types.TextContent(type="text", text=result.display_text)],
                isError=False,
            )
        )

    # The call_tool decorator folds raised errors into text-only results
    server.request_handlers[types.CallToolRequest] = call_tool

    logger.debug(f"Built MCP server '{settings.server_name}' with {len(catalog)} tools")
    return server
