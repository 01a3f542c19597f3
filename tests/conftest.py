"""
Shared test fixtures for the calculator MCP server.

Every fixture builds its own application state so tests never share an
MCP session or depend on the process environment.
"""

import pytest
from fastapi.testclient import TestClient

from calculator_mcp.config import ServerSettings
from calculator_mcp.dependencies import AppState
from calculator_mcp.main import create_app
from calculator_mcp.services.dispatcher import ToolDispatcher
from calculator_mcp.services.tool_catalog import build_default_catalog


@pytest.fixture
def settings():
    """Short keep-alive, and plain JSON answers on /mcp so TestClient can read them."""
    return ServerSettings(sse_keepalive_seconds=0.05, mcp_json_response=True)


@pytest.fixture
def catalog():
    return build_default_catalog()


@pytest.fixture
def dispatcher(catalog):
    return ToolDispatcher(catalog)


@pytest.fixture
def app_state(settings, catalog, dispatcher):
    return AppState(settings=settings, catalog=catalog, dispatcher=dispatcher)


@pytest.fixture
def client(app_state):
    """FastAPI test client with lifespan events running."""
    app = create_app(app_state)
    with TestClient(app) as test_client:
        yield test_client
