"""
Tool listing and invocation endpoints (plain request/response).
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from calculator_mcp.dependencies import get_dispatcher, get_tool_catalog
from calculator_mcp.models.schemas import (
    APIResponse,
    ErrorDetail,
    ToolCallRequest,
    ToolCallResponse,
    ToolInfo,
    ToolListResponse,
)
from calculator_mcp.models.tool_schema import ToolFailure
from calculator_mcp.services.dispatcher import ToolDispatcher
from calculator_mcp.services.tool_catalog import ToolCatalog

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/list", response_model=APIResponse)
async def list_tools(catalog: ToolCatalog = Depends(get_tool_catalog)):
    """
    List all available tools.

    Args:
        catalog: Tool catalog dependency

    Returns:
        Tool descriptors in catalog order
    """
    tools = [ToolInfo(**descriptor.to_listing()) for descriptor in catalog.list_tools()]
    response = ToolListResponse(tools=tools, total=len(tools))
    return APIResponse(success=True, data=response.model_dump())


@router.post("/call", response_model=APIResponse)
async def call_tool(
    request: ToolCallRequest,
    dispatcher: ToolDispatcher = Depends(get_dispatcher),
):
    """
    Invoke a tool and return its text result.

    Failures are returned with a 400 (invalid argument, unknown tool) or
    500 (internal error) status and the error kind as the error code.

    Args:
        request: Tool name and arguments
        dispatcher: Tool dispatcher dependency

    Returns:
        Tool result content
    """
    logger.info(f"Tool call request: name={request.name}, arguments={request.arguments}")

    result = dispatcher.invoke(request.name, request.arguments)

    if isinstance(result, ToolFailure):
        body = APIResponse(
            success=False,
            error=ErrorDetail(
                code=result.kind.value,
                message=result.message,
                details={"tool": request.name},
            ),
        )
        return JSONResponse(
            status_code=result.kind.http_status,
            content=body.model_dump(mode="json"),
        )

    response = ToolCallResponse(**result.to_content())
    return APIResponse(success=True, data=response.model_dump())
