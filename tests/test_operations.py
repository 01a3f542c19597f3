import math

import pytest

from calculator_mcp.services.operations import (
    OPERATIONS,
    PreconditionError,
    divide,
    format_number,
    power,
    square_root,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    "value, expected",
    [
        (8, "8"),
        (8.0, "8"),
        (-3.0, "-3"),
        (0.5, "0.5"),
        (-0.0, "0"),
        (0.1 + 0.2, "0.30000000000000004"),
        (1e16, "1e+16"),
        (math.inf, "inf"),
        (math.nan, "nan"),
    ],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


@pytest.mark.unit
def test_basic_operations_render_display_text():
    assert OPERATIONS["add"].apply({"a": 5.0, "b": 3.0}) == "5 + 3 = 8"
    assert OPERATIONS["subtract"].apply({"a": 5.0, "b": 8.0}) == "5 - 8 = -3"
    assert OPERATIONS["multiply"].apply({"a": 2.5, "b": 4.0}) == "2.5 × 4 = 10"
    assert OPERATIONS["divide"].apply({"a": 7.0, "b": 2.0}) == "7 ÷ 2 = 3.5"
    assert OPERATIONS["power"].apply({"base": 2.0, "exponent": 3.0}) == "2^3 = 8"
    assert OPERATIONS["sqrt"].apply({"number": 16.0}) == "√16 = 4"


@pytest.mark.unit
def test_divide_by_zero_raises_precondition_error():
    with pytest.raises(PreconditionError, match="Cannot divide by zero"):
        divide(1.0, 0.0)
    with pytest.raises(PreconditionError):
        divide(0.0, -0.0)


@pytest.mark.unit
def test_square_root_of_negative_raises_precondition_error():
    with pytest.raises(PreconditionError, match="Cannot calculate square root of negative number"):
        square_root(-4.0)


@pytest.mark.unit
def test_square_root_edge_values():
    assert square_root(0.0) == 0.0
    assert square_root(2.0) == math.sqrt(2.0)
    assert math.isnan(square_root(math.nan))
    assert square_root(math.inf) == math.inf


@pytest.mark.unit
def test_power_follows_ieee_semantics():
    assert power(0.0, 0.0) == 1.0
    assert power(10.0, -1.0) == 0.1
    assert power(4.0, 0.5) == 2.0
    assert power(-8.0, 3.0) == -512.0
    assert math.isnan(power(-8.0, 1.0 / 3.0))
    assert power(0.0, -1.0) == math.inf
    assert power(-0.0, -1.0) == -math.inf
    assert power(-0.0, -2.0) == math.inf
    assert power(10.0, 400.0) == math.inf
    assert power(-10.0, 401.0) == -math.inf


@pytest.mark.unit
def test_operations_cover_six_tools_in_order():
    assert list(OPERATIONS) == ["add", "subtract", "multiply", "divide", "power", "sqrt"]
