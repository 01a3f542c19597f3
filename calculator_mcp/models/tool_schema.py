"""
Tool descriptor, invocation and result models.
"""

from enum import Enum
from typing import Any, Dict, Literal, Optional, Tuple, Union

from mcp import types
from pydantic import BaseModel, ConfigDict, Field


class ErrorKind(str, Enum):
    """Closed classification of tool failures surfaced to clients."""
    INVALID_ARGUMENT = "InvalidArgument"
    METHOD_NOT_FOUND = "MethodNotFound"
    INTERNAL_ERROR = "InternalError"

    @property
    def jsonrpc_code(self) -> int:
        """JSON-RPC error code for this kind."""
        return _JSONRPC_CODES[self]

    @property
    def http_status(self) -> int:
        """HTTP status code for this kind."""
        return 500 if self is ErrorKind.INTERNAL_ERROR else 400


_JSONRPC_CODES = {
    ErrorKind.INVALID_ARGUMENT: types.INVALID_PARAMS,
    ErrorKind.METHOD_NOT_FOUND: types.METHOD_NOT_FOUND,
    ErrorKind.INTERNAL_ERROR: types.INTERNAL_ERROR,
}


class ParameterSpec(BaseModel):
    """A single named tool parameter."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Parameter name")
    description: str = Field(description="Parameter description")
    type: Literal["number"] = Field(default="number", description="JSON Schema type")
    required: bool = Field(default=True, description="Whether the parameter is required")
    minimum: Optional[float] = Field(
        default=None,
        description="Documented lower bound (advisory, not enforced by the schema)"
    )

    def json_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {"type": self.type, "description": self.description}
        if self.minimum is not None:
            schema["minimum"] = self.minimum
        return schema


class ToolDescriptor(BaseModel):
    """Static declaration of a tool: name, description and parameter schema."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Unique tool name")
    description: str = Field(description="Human-readable tool description")
    parameters: Tuple[ParameterSpec, ...] = Field(description="Ordered parameters")

    @property
    def parameter_names(self) -> Tuple[str, ...]:
        return tuple(p.name for p in self.parameters)

    def input_schema(self) -> Dict[str, Any]:
        """
        Render the parameters as a JSON Schema object.

        Returns:
            Schema dict with ``type``, ``properties`` and ``required`` keys
        """
        return {
            "type": "object",
            "properties": {p.name: p.json_schema() for p in self.parameters},
            "required": [p.name for p in self.parameters if p.required],
        }

    def to_listing(self) -> Dict[str, Any]:
        """Tool listing entry as advertised to clients."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema(),
        }

    def to_mcp_tool(self) -> types.Tool:
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema(),
        )


class ToolInvocation(BaseModel):
    """A single tool call request."""
    name: str = Field(description="Tool name")
    arguments: Dict[str, Any] = Field(default_factory=dict, description="Tool arguments")


class ToolSuccess(BaseModel):
    """Successful tool result."""
    model_config = ConfigDict(frozen=True)

    display_text: str

    def to_content(self) -> Dict[str, Any]:
        return {"content": [{"type": "text", "text": self.display_text}]}


class ToolFailure(BaseModel):
    """Classified tool failure."""
    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    message: str

    def to_error_data(self) -> types.ErrorData:
        return types.ErrorData(
            code=self.kind.jsonrpc_code,
            message=self.message,
            data={"kind": self.kind.value},
        )


ToolResult = Union[ToolSuccess, ToolFailure]
