"""
Arithmetic operations exposed as calculator tools.

Each operation is a pure function over floats plus a display template used
to render the human-readable result returned to MCP clients.
"""

import math
from dataclasses import dataclass
from typing import Callable, Dict, Mapping, Tuple

# Integral floats below this magnitude are printed without a trailing ".0"
_INTEGRAL_DISPLAY_LIMIT = 1e16


class PreconditionError(ValueError):
    """Raised when an operation's input precondition is violated."""
    pass


def format_number(value: float) -> str:
    """
    Render a number for display.

    Uses Python's default float text, except that integral values are shown
    without a fractional part (``8`` rather than ``8.0``).

    Args:
        value: Number to render

    Returns:
        Display string
    """
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, int):
        return str(value)
    if math.isfinite(value) and value.is_integer() and abs(value) < _INTEGRAL_DISPLAY_LIMIT:
        return str(int(value))
    return repr(value)


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value.is_integer() and int(value) % 2 == 1


def add(a: float, b: float) -> float:
    return a + b


def subtract(a: float, b: float) -> float:
    return a - b


def multiply(a: float, b: float) -> float:
    return a * b


def divide(a: float, b: float) -> float:
    """Divide a by b. Raises PreconditionError if b is zero."""
    if b == 0:
        raise PreconditionError("Cannot divide by zero")
    return a / b


def power(base: float, exponent: float) -> float:
    """
    Raise base to the power of exponent with IEEE-754 pow semantics.

    ``math.pow`` raises where IEEE pow returns a special value, so those
    cases are mapped back: negative base with a fractional exponent gives
    NaN, zero to a negative power gives infinity, overflow gives infinity.
    """
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0:
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


def square_root(number: float) -> float:
    """Principal square root. Raises PreconditionError for negative input."""
    if number < 0:
        raise PreconditionError("Cannot calculate square root of negative number")
    return math.sqrt(number)


@dataclass(frozen=True)
class Operation:
    """A named arithmetic operation and the way its result is displayed."""
    name: str
    params: Tuple[str, ...]
    func: Callable[..., float]
    template: str

    def apply(self, values: Mapping[str, float]) -> str:
        """
        Compute the operation and render its display text.

        Args:
            values: Parameter name to numeric value

        Returns:
            Display text such as ``"5 + 3 = 8"``

        Raises:
            PreconditionError: If the input violates the operation's precondition
        """
        result = self.func(*(values[param] for param in self.params))
        rendered = {param: format_number(values[param]) for param in self.params}
        return self.template.format(result=format_number(result), **rendered)


OPERATIONS: Dict[str, Operation] = {
    op.name: op
    for op in (
        Operation("add", ("a", "b"), add, "{a} + {b} = {result}"),
        Operation("subtract", ("a", "b"), subtract, "{a} - {b} = {result}"),
        Operation("multiply", ("a", "b"), multiply, "{a} × {b} = {result}"),
        Operation("divide", ("a", "b"), divide, "{a} ÷ {b} = {result}"),
        Operation("power", ("base", "exponent"), power, "{base}^{exponent} = {result}"),
        Operation("sqrt", ("number",), square_root, "√{number} = {result}"),
    )
}
