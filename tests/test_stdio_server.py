import pytest
from mcp import types
from mcp.shared.exceptions import McpError
from mcp.shared.memory import create_connected_server_and_client_session

from calculator_mcp.config import ServerSettings
from calculator_mcp.mcp_server import build_server


@pytest.fixture
def server(catalog, dispatcher):
    return build_server(catalog, dispatcher, ServerSettings(server_name="stdio-test"))


@pytest.mark.integration
@pytest.mark.asyncio
async def test_list_tools_over_mcp_session(server, catalog):
    async with create_connected_server_and_client_session(server) as session:
        result = await session.list_tools()

    assert [tool.name for tool in result.tools] == list(catalog.names())
    sqrt = result.tools[-1]
    assert sqrt.inputSchema["properties"]["number"]["minimum"] == 0
    assert sqrt.inputSchema["required"] == ["number"]


@pytest.mark.integration
@pytest.mark.asyncio
async def test_call_tool_over_mcp_session(server):
    async with create_connected_server_and_client_session(server) as session:
        result = await session.call_tool("add", {"a": 5, "b": 3})

    assert result.isError is False
    assert result.content[0].text == "5 + 3 = 8"


@pytest.mark.integration
@pytest.mark.asyncio
@pytest.mark.parametrize(
    "name, arguments, code, message, kind",
    [
        ("divide", {"a": 1, "b": 0}, types.INVALID_PARAMS, "Cannot divide by zero", "InvalidArgument"),
        ("sqrt", {"number": -4}, types.INVALID_PARAMS,
         "Cannot calculate square root of negative number", "InvalidArgument"),
        ("add", {"a": 1}, types.INVALID_PARAMS, "Missing required argument: b", "InvalidArgument"),
        ("foo", {}, types.METHOD_NOT_FOUND, "Unknown tool: foo", "MethodNotFound"),
    ],
)
async def test_tool_failures_carry_error_kind(server, name, arguments, code, message, kind):
    async with create_connected_server_and_client_session(server) as session:
        with pytest.raises(McpError) as exc_info:
            await session.call_tool(name, arguments)

    error = exc_info.value.error
    assert error.code == code
    assert error.message == message
    assert error.data == {"kind": kind}


@pytest.mark.integration
@pytest.mark.asyncio
async def test_session_stays_usable_after_a_failure(server):
    async with create_connected_server_and_client_session(server) as session:
        with pytest.raises(McpError):
            await session.call_tool("divide", {"a": 1, "b": 0})
        result = await session.call_tool("multiply", {"a": 4, "b": 5})

    assert result.content[0].text == "4 × 5 = 20"


@pytest.mark.integration
@pytest.mark.asyncio
async def test_server_identity(server):
    async with create_connected_server_and_client_session(server) as session:
        assert await session.send_ping() is not None

    assert server.name == "stdio-test"
