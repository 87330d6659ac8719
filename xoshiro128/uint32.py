"""
Unsigned 32-bit helpers.

Python integers do not wrap, so every operation that would overflow a
32-bit register is masked explicitly.
"""

import numbers
from typing import Any

from xoshiro128.errors import StateValidationError

MASK32 = 0xFFFFFFFF


def is_integer(value: Any) -> bool:
    """True for int and numpy integer scalars, False for bool and floats."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def validate32(value: Any, name: str) -> int:
    """
    Check that value is an unsigned 32-bit integer and return it as int.

    Raises:
        StateValidationError: non-integer, negative, or >= 2^32
    """
    if not is_integer(value):
        raise StateValidationError(f"{name} must be an integer: {value!r}")

    value = int(value)

    if value < 0:
        raise StateValidationError(f"{name} must be non-negative: {value}")

    if value > MASK32:
        raise StateValidationError(f"{name} must be less than 2^32: {value}")

    return value


def rotl32(x: int, k: int) -> int:
    return ((x << k) | (x >> (32 - k))) & MASK32


def mul32(a: int, b: int) -> int:
    return (a * b) & MASK32
