"""
Tool catalog for the calculator tools.
"""

import logging
from typing import Iterable, Iterator, Optional, Tuple

from calculator_mcp.models.tool_schema import ParameterSpec, ToolDescriptor

logger = logging.getLogger(__name__)


class ToolCatalogError(Exception):
    """Exception raised for tool catalog errors."""
    pass


DEFAULT_TOOLS: Tuple[ToolDescriptor, ...] = (
    ToolDescriptor(
        name="add",
        description="Add two numbers together",
        parameters=(
            ParameterSpec(name="a", description="First number"),
            ParameterSpec(name="b", description="Second number"),
        ),
    ),
    ToolDescriptor(
        name="subtract",
        description="Subtract second number from first number",
        parameters=(
            ParameterSpec(name="a", description="Number to subtract from"),
            ParameterSpec(name="b", description="Number to subtract"),
        ),
    ),
    ToolDescriptor(
        name="multiply",
        description="Multiply two numbers",
        parameters=(
            ParameterSpec(name="a", description="First number"),
            ParameterSpec(name="b", description="Second number"),
        ),
    ),
    ToolDescriptor(
        name="divide",
        description="Divide first number by second number",
        parameters=(
            ParameterSpec(name="a", description="Dividend"),
            ParameterSpec(name="b", description="Divisor"),
        ),
    ),
    ToolDescriptor(
        name="power",
        description="Raise first number to the power of second number",
        parameters=(
            ParameterSpec(name="base", description="Base number"),
            ParameterSpec(name="exponent", description="Exponent"),
        ),
    ),
    ToolDescriptor(
        name="sqrt",
        description="Calculate square root of a number",
        parameters=(
            ParameterSpec(
                name="number",
                description="Number to find square root of",
                minimum=0,
            ),
        ),
    ),
)


class ToolCatalog:
    """Immutable, ordered collection of tool descriptors."""

    def __init__(self, tools: Iterable[ToolDescriptor]):
        """
        Initialize the catalog.

        Args:
            tools: Tool descriptors in listing order

        Raises:
            ToolCatalogError: If two descriptors share a name
        """
        self._tools: Tuple[ToolDescriptor, ...] = tuple(tools)
        self._by_name = {}
        for descriptor in self._tools:
            if descriptor.name in self._by_name:
                raise ToolCatalogError(f"Duplicate tool name: '{descriptor.name}'")
            self._by_name[descriptor.name] = descriptor

    def list_tools(self) -> Tuple[ToolDescriptor, ...]:
        """
        List all tools in declaration order.

        Returns:
            Tuple of tool descriptors
        """
        return self._tools

    def get(self, name: str) -> Optional[ToolDescriptor]:
        """Exact, case-sensitive lookup by tool name."""
        return self._by_name.get(name)

    def names(self) -> Tuple[str, ...]:
        return tuple(d.name for d in self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[ToolDescriptor]:
        return iter(self._tools)

    def __len__(self) -> int:
        return len(self._tools)


def build_default_catalog() -> ToolCatalog:
    """Build the catalog of the six calculator tools."""
    catalog = ToolCatalog(DEFAULT_TOOLS)
    logger.debug(f"Built tool catalog: {', '.join(catalog.names())}")
    return catalog
