"""
Dependency injection functions for FastAPI routes.
Separated from main.py to avoid circular imports.
"""

import time
from typing import Optional

from fastapi import Request
from mcp.server.sse import SseServerTransport
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager

from calculator_mcp.config import ServerSettings
from calculator_mcp.mcp_server import build_server
from calculator_mcp.services.dispatcher import ToolDispatcher
from calculator_mcp.services.tool_catalog import ToolCatalog, build_default_catalog

# Path SSE clients post their requests to, announced in the stream's endpoint event
SSE_MESSAGE_PATH = "/messages/"


# Application state
class AppState:
    """Application state container."""

    def __init__(
        self,
        settings: Optional[ServerSettings] = None,
        catalog: Optional[ToolCatalog] = None,
        dispatcher: Optional[ToolDispatcher] = None,
    ):
        self.settings = settings or ServerSettings()
        self.catalog = catalog or build_default_catalog()
        self.dispatcher = dispatcher or ToolDispatcher(self.catalog)
        self.mcp_server = build_server(self.catalog, self.dispatcher, self.settings)
        self.sse_transport = SseServerTransport(SSE_MESSAGE_PATH)
        # run() may only be entered once, so each AppState serves one app lifespan
        self.session_manager = StreamableHTTPSessionManager(
            app=self.mcp_server,
            json_response=self.settings.mcp_json_response,
        )
        self.started_at = time.monotonic()

    def uptime(self) -> float:
        return time.monotonic() - self.started_at


# Dependency injection functions for routes
def get_app_state(request: Request) -> AppState:
    """Get the application state attached to the running app."""
    return request.app.state.calculator


def get_settings(request: Request) -> ServerSettings:
    """Get server settings."""
    return get_app_state(request).settings


def get_tool_catalog(request: Request) -> ToolCatalog:
    """Get tool catalog instance."""
    return get_app_state(request).catalog


def get_dispatcher(request: Request) -> ToolDispatcher:
    """Get tool dispatcher instance."""
    return get_app_state(request).dispatcher
