"""
API request and response schemas.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Literal, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ==================== Base Response Models ====================


class ErrorDetail(BaseModel):
    """Error detail information."""
    code: str = Field(description="Error code")
    message: str = Field(description="Error message")
    details: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Additional error details"
    )


class APIResponse(BaseModel):
    """Standard API response wrapper."""
    success: bool = Field(description="Whether the request was successful")
    data: Optional[Any] = Field(default=None, description="Response data")
    error: Optional[ErrorDetail] = Field(default=None, description="Error details if failed")
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="Response timestamp"
    )
    request_id: str = Field(
        default_factory=lambda: str(uuid4()),
        description="Unique request identifier"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": True,
                "data": {"content": [{"type": "text", "text": "5 + 3 = 8"}]},
                "error": None,
                "timestamp": "2025-01-14T10:00:00Z",
                "request_id": "550e8400-e29b-41d4-a716-446655440000"
            }
        }
    )


# ==================== Server Information ====================


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = Field(description="Overall health status")
    version: str = Field(description="Server version")
    timestamp: datetime = Field(description="Check timestamp")
    components: Dict[str, str] = Field(
        default_factory=dict,
        description="Component health status"
    )


class ServerInfo(BaseModel):
    """Server identity and entry points."""
    name: str = Field(description="Advertised MCP server name")
    version: str = Field(description="Server version")
    transports: List[str] = Field(description="Supported transports")
    endpoints: Dict[str, str] = Field(description="HTTP entry points by purpose")


class StatusResponse(BaseModel):
    """Server status with tool catalog echo."""
    server: ServerInfo = Field(description="Server identity")
    uptime_seconds: float = Field(description="Seconds since application start")
    tools: List[Dict[str, Any]] = Field(description="Tool catalog")


# ==================== Tools ====================


class ToolInfo(BaseModel):
    """Tool listing entry."""
    name: str = Field(description="Tool name")
    description: str = Field(description="Tool description")
    inputSchema: Dict[str, Any] = Field(description="JSON Schema of the tool arguments")


class ToolListResponse(BaseModel):
    """Response with list of tools."""
    tools: List[ToolInfo] = Field(description="List of tools")
    total: int = Field(description="Total number of tools")


class ToolCallRequest(BaseModel):
    """Request to invoke a tool."""
    name: str = Field(description="Tool name")
    # Left untyped so the dispatcher reports malformed arguments itself
    arguments: Optional[Any] = Field(
        default_factory=dict,
        description="Tool arguments keyed by parameter name"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"name": "add", "arguments": {"a": 5, "b": 3}}
        }
    )


class TextContent(BaseModel):
    """Text content block of a tool result."""
    type: Literal["text"] = Field(default="text", description="Content type")
    text: str = Field(description="Result text")


class ToolCallResponse(BaseModel):
    """Successful tool invocation result."""
    content: List[TextContent] = Field(description="Result content blocks")
