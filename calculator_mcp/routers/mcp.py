"""
MCP endpoints served by the SDK transports.

- ``/mcp``: streamable HTTP (POST requests, GET notification stream, DELETE
  to end a session)
- ``/sse`` + ``/messages/``: the server-sent event transport; the stream's
  first ``endpoint`` event names the URL to post requests to

Both run the same MCP server as the stdio entry point.
"""

import logging

from fastapi import FastAPI
from starlette.types import Receive, Scope, Send

from calculator_mcp.dependencies import SSE_MESSAGE_PATH, AppState

logger = logging.getLogger(__name__)


class StreamableHttpEndpoint:
    """ASGI endpoint handing ``/mcp`` requests to the session manager."""

    def __init__(self, state: AppState):
        self.state = state

    async def __call__(self, scope: Scope, receive: Receive, send: Send):
        await self.state.session_manager.handle_request(scope, receive, send)


class SseEndpoint:
    """ASGI endpoint running one MCP session per ``GET /sse`` connection."""

    def __init__(self, state: AppState):
        self.state = state

    async def __call__(self, scope: Scope, receive: Receive, send: Send):
        server = self.state.mcp_server
        client = scope.get("client")
        logger.info(f"SSE client connected: {client}")
        async with self.state.sse_transport.connect_sse(scope, receive, send) as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )
        logger.info(f"SSE client disconnected: {client}")


def include_mcp_routes(app: FastAPI, state: AppState):
    """
    Register the MCP transport endpoints on the app.

    Args:
        app: FastAPI application
        state: Application state holding the MCP server and transports
    """
    app.add_route("/mcp", StreamableHttpEndpoint(state), include_in_schema=False)
    app.add_route("/sse", SseEndpoint(state), methods=["GET"], include_in_schema=False)
    app.mount(SSE_MESSAGE_PATH.rstrip("/"), app=state.sse_transport.handle_post_message)
