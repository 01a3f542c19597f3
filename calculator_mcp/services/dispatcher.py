"""
Tool dispatcher.

Routes a tool name and its arguments to the matching arithmetic operation
and normalizes every outcome into a ToolResult. Nothing raised while
evaluating a tool escapes ``invoke``.
"""

import logging
import math
from typing import Any, Dict, Mapping, Optional

from calculator_mcp.models.tool_schema import (
    ErrorKind,
    ToolDescriptor,
    ToolFailure,
    ToolInvocation,
    ToolResult,
    ToolSuccess,
)
from calculator_mcp.services.operations import OPERATIONS, Operation, PreconditionError
from calculator_mcp.services.tool_catalog import ToolCatalog, ToolCatalogError

logger = logging.getLogger(__name__)


class ArgumentError(ValueError):
    """Raised when tool arguments are missing or not numeric."""
    pass


class ToolDispatcher:
    """Stateless dispatcher from tool invocations to arithmetic operations."""

    def __init__(
        self,
        catalog: ToolCatalog,
        operations: Optional[Mapping[str, Operation]] = None,
    ):
        """
        Initialize the dispatcher.

        Args:
            catalog: Tool catalog advertised to clients
            operations: Operation per tool name (defaults to the built-in set)

        Raises:
            ToolCatalogError: If catalog and operations do not describe the same tools
        """
        self.catalog = catalog
        self._operations: Dict[str, Operation] = dict(
            OPERATIONS if operations is None else operations
        )
        self._check_consistency()

    def _check_consistency(self):
        declared = set(self.catalog.names())
        handled = set(self._operations)

        if declared != handled:
            missing_handlers = sorted(declared - handled)
            missing_descriptors = sorted(handled - declared)
            raise ToolCatalogError(
                "Catalog and dispatcher diverge: "
                f"tools without handler={missing_handlers}, "
                f"handlers without descriptor={missing_descriptors}"
            )

        for descriptor in self.catalog:
            operation = self._operations[descriptor.name]
            if descriptor.parameter_names != operation.params:
                raise ToolCatalogError(
                    f"Parameter mismatch for '{descriptor.name}': "
                    f"schema={list(descriptor.parameter_names)}, "
                    f"operation={list(operation.params)}"
                )

    def handled_tools(self):
        """Names of the tools this dispatcher can execute."""
        return tuple(self._operations)

    def dispatch(self, invocation: ToolInvocation) -> ToolResult:
        return self.invoke(invocation.name, invocation.arguments)

    def invoke(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> ToolResult:
        """
        Invoke a tool by name.

        Args:
            name: Tool name (exact, case-sensitive)
            arguments: Mapping from parameter name to numeric value

        Returns:
            ToolSuccess with display text, or ToolFailure with an ErrorKind
        """
        descriptor = self.catalog.get(name) if isinstance(name, str) else None
        if descriptor is None:
            logger.info(f"Unknown tool requested: {name}")
            return ToolFailure(kind=ErrorKind.METHOD_NOT_FOUND, message=f"Unknown tool: {name}")

        try:
            values = _extract_arguments(descriptor, arguments)
            display_text = self._operations[name].apply(values)
        except (ArgumentError, PreconditionError) as e:
            logger.info(f"Rejected call to '{name}': {e}")
            return ToolFailure(kind=ErrorKind.INVALID_ARGUMENT, message=str(e))
        except Exception as e:
            logger.error(f"Tool '{name}' failed: {type(e).__name__}: {e}", exc_info=True)
            return ToolFailure(kind=ErrorKind.INTERNAL_ERROR, message=f"Calculator error: {e}")

        logger.debug(f"Tool '{name}' succeeded: {display_text}")
        return ToolSuccess(display_text=display_text)


def _to_float(value) -> float:
    try:
        return float(value)
    except OverflowError:
        # Integers beyond the double range round to infinity
        return math.inf if value > 0 else -math.inf


def _extract_arguments(
    descriptor: ToolDescriptor,
    arguments: Optional[Mapping[str, Any]],
) -> Dict[str, float]:
    """
    Pull the declared numeric parameters out of the raw arguments.

    Missing or non-numeric values are rejected up front instead of being left
    to fail inside the arithmetic. Booleans are not numbers here even though
    Python treats them as ints. Extra keys are ignored.
    """
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, Mapping):
        raise ArgumentError("Arguments must be an object")

    values: Dict[str, float] = {}
    for param in descriptor.parameters:
        value = arguments.get(param.name)
        if value is None:
            if param.required:
                raise ArgumentError(f"Missing required argument: {param.name}")
            continue
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ArgumentError(f"Argument '{param.name}' must be a number")
        values[param.name] = _to_float(value)
    return values
