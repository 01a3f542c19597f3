"""
FastAPI application for the calculator MCP server (HTTP/SSE transport).
"""

import argparse
import logging
import sys
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sse_starlette.sse import EventSourceResponse

from calculator_mcp import __version__
from calculator_mcp.config import ConfigurationError, configure_logging, load_settings
from calculator_mcp.dependencies import AppState, get_app_state
from calculator_mcp.models.schemas import (
    APIResponse,
    ErrorDetail,
    HealthResponse,
    ServerInfo,
    StatusResponse,
)
from calculator_mcp.routers import tools
from calculator_mcp.routers.mcp import include_mcp_routes

logger = logging.getLogger(__name__)

ENDPOINTS = {
    "health": "/health",
    "status": "/status",
    "tools": "/tools/list",
    "call": "/tools/call",
    "mcp": "/mcp",
    "sse": "/sse",
    "messages": "/messages/",
}


def _server_info(state: AppState) -> ServerInfo:
    return ServerInfo(
        name=state.settings.server_name,
        version=__version__,
        transports=["streamable-http", "sse"],
        endpoints=ENDPOINTS,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Handles startup and shutdown logic.
    """
    state: AppState = app.state.calculator
    settings = state.settings

    logger.info("=" * 60)
    logger.info(f"Starting calculator MCP server {settings.server_name} v{__version__}")
    logger.info(f"Registered tools: {len(state.catalog)} ({', '.join(state.catalog.names())})")
    logger.info(f"Listening on http://{settings.host}:{settings.port}")
    logger.info(f"Health check: http://{settings.host}:{settings.port}/health")
    logger.info(f"MCP endpoint: http://{settings.host}:{settings.port}/mcp")
    logger.info(f"SSE endpoint: http://{settings.host}:{settings.port}/sse")
    logger.info("=" * 60)

    # sse-starlette reads the keep-alive ping interval from the class default
    EventSourceResponse.DEFAULT_PING_INTERVAL = settings.sse_keepalive_seconds

    async with state.session_manager.run():
        yield
        # Shutdown
        logger.info("Shutting down calculator MCP server")


async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler."""
    logger.error(
        f"Unhandled exception in {request.method} {request.url.path}: {str(exc)}",
        exc_info=True,
        extra={"method": request.method, "path": request.url.path}
    )
    return JSONResponse(
        status_code=500,
        content=APIResponse(
            success=False,
            error=ErrorDetail(
                code="INTERNAL_ERROR",
                message=str(exc),
                details={"type": type(exc).__name__},
            ),
        ).model_dump(mode="json"),
    )


async def root(state: AppState = Depends(get_app_state)):
    """Root endpoint."""
    return APIResponse(success=True, data=_server_info(state).model_dump())


async def status(state: AppState = Depends(get_app_state)):
    """Server identity, uptime and tool catalog."""
    response = StatusResponse(
        server=_server_info(state),
        uptime_seconds=round(state.uptime(), 3),
        tools=[descriptor.to_listing() for descriptor in state.catalog.list_tools()],
    )
    return APIResponse(success=True, data=response.model_dump())


async def health(state: AppState = Depends(get_app_state)):
    """Health check endpoint."""
    components = {
        "api": "healthy",
        "tool_catalog": "healthy",
        "dispatcher": "healthy",
        "tools": str(len(state.catalog)),
    }

    health_response = HealthResponse(
        status="healthy",
        version=__version__,
        timestamp=datetime.now(timezone.utc),
        components=components,
    )

    return APIResponse(success=True, data=health_response.model_dump())


def create_app(state: Optional[AppState] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        state: Application state; built from the environment when omitted

    Returns:
        Configured FastAPI app
    """
    state = state or AppState(settings=load_settings())

    app = FastAPI(
        title="Calculator MCP Server",
        description="Arithmetic tools exposed over the Model Context Protocol",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.calculator = state

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=state.settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["mcp-session-id"],
    )

    app.add_exception_handler(Exception, global_exception_handler)

    # Include routers
    app.include_router(tools.router, prefix="/tools", tags=["Tools"])
    include_mcp_routes(app, state)

    # Root endpoints
    app.add_api_route("/", root, methods=["GET"], response_model=APIResponse, tags=["Server"])
    app.add_api_route("/status", status, methods=["GET"], response_model=APIResponse, tags=["Server"])
    app.add_api_route("/health", health, methods=["GET"], response_model=APIResponse, tags=["Server"])

    return app


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Calculator MCP server (HTTP/SSE transport)")
    parser.add_argument("--host", help="Bind address (overrides HOST)")
    parser.add_argument("--port", type=int, help="Listen port (overrides PORT)")
    parser.add_argument("--log-level", help="Log level (overrides LOG_LEVEL)")
    return parser.parse_args(argv)


def run(argv: Optional[List[str]] = None) -> int:
    """
    Run the HTTP server until interrupted.

    For an import string (e.g. ``uvicorn --reload``) use the factory:
    ``uvicorn calculator_mcp.main:create_app --factory``.

    Returns:
        Process exit code
    """
    import uvicorn

    args = _parse_args(argv)

    try:
        settings = load_settings(overrides={
            "host": args.host,
            "port": args.port,
            "log_level": args.log_level,
        })
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    configure_logging(settings)

    app = create_app(AppState(settings=settings))

    # uvicorn installs its own SIGINT/SIGTERM handling and exits non-zero if it cannot bind
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(run())
