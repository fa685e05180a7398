"""Addition and subtraction for integer and floating-point operands."""

from typing import TypeAlias, overload

Number: TypeAlias = int | float


@overload
def addition(a: int, b: int) -> int: ...


@overload
def addition(a: float, b: float) -> float: ...


def addition(a: Number, b: Number) -> Number:
    """Return the sum of ``a`` and ``b``."""
    return a + b


@overload
def subtraction(a: int, b: int) -> int: ...


@overload
def subtraction(a: float, b: float) -> float: ...


def subtraction(a: Number, b: Number) -> Number:
    """Return the difference ``a - b``."""
    return a - b
