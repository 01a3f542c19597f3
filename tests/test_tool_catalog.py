import pytest

from calculator_mcp.models.tool_schema import ParameterSpec, ToolDescriptor
from calculator_mcp.services.tool_catalog import ToolCatalog, ToolCatalogError


@pytest.mark.unit
def test_catalog_lists_six_disjoint_tools_in_order(catalog):
    names = [descriptor.name for descriptor in catalog.list_tools()]
    assert names == ["add", "subtract", "multiply", "divide", "power", "sqrt"]
    assert len(set(names)) == 6
    assert len(catalog) == 6


@pytest.mark.unit
def test_list_tools_is_deterministic(catalog):
    assert catalog.list_tools() == catalog.list_tools()
    assert [d.to_listing() for d in catalog] == [d.to_listing() for d in catalog]


@pytest.mark.unit
def test_binary_tool_schema_shape(catalog):
    schema = catalog.get("add").input_schema()
    assert schema == {
        "type": "object",
        "properties": {
            "a": {"type": "number", "description": "First number"},
            "b": {"type": "number", "description": "Second number"},
        },
        "required": ["a", "b"],
    }


@pytest.mark.unit
def test_power_schema_uses_base_and_exponent(catalog):
    schema = catalog.get("power").input_schema()
    assert list(schema["properties"]) == ["base", "exponent"]
    assert schema["required"] == ["base", "exponent"]


@pytest.mark.unit
def test_sqrt_schema_declares_minimum_zero(catalog):
    schema = catalog.get("sqrt").input_schema()
    assert schema["properties"]["number"]["minimum"] == 0
    assert schema["required"] == ["number"]
    # no other parameter carries a minimum
    for descriptor in catalog:
        if descriptor.name != "sqrt":
            assert all("minimum" not in p for p in descriptor.input_schema()["properties"].values())


@pytest.mark.unit
def test_lookup_is_exact_and_case_sensitive(catalog):
    assert catalog.get("add") is not None
    assert catalog.get("Add") is None
    assert catalog.get("add ") is None
    assert "sqrt" in catalog
    assert "SQRT" not in catalog


@pytest.mark.unit
def test_listing_matches_mcp_tool(catalog):
    descriptor = catalog.get("divide")
    tool = descriptor.to_mcp_tool()
    assert tool.name == "divide"
    assert tool.description == "Divide first number by second number"
    assert tool.inputSchema == descriptor.to_listing()["inputSchema"]


@pytest.mark.unit
def test_duplicate_names_are_rejected():
    descriptor = ToolDescriptor(
        name="add",
        description="Add",
        parameters=(ParameterSpec(name="a", description="a"),),
    )
    with pytest.raises(ToolCatalogError, match="Duplicate tool name"):
        ToolCatalog([descriptor, descriptor])
