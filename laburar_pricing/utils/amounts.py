"""Amount validation utilities"""

import math
from decimal import Decimal
from typing import Union

from laburar_pricing.domain.exceptions import InvalidArgumentError

Number = Union[int, float, Decimal, str]


def ensure_finite(value: Number, field: str) -> float:
    """Coerce value to float, rejecting non-numeric, NaN and infinite input"""
    if isinstance(value, bool):
        raise InvalidArgumentError(f"{field} must be a number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"{field} must be a number, got {value!r}") from e

    if not math.isfinite(number):
        raise InvalidArgumentError(f"{field} must be finite, got {value!r}")
    return number


def ensure_amount(value: Number, field: str = "amount") -> float:
    """Coerce value to a non-negative finite float"""
    number = ensure_finite(value, field)
    if number < 0:
        raise InvalidArgumentError(f"{field} must not be negative, got {value!r}")
    return number


def ensure_computable(result: float, field: str, value: float) -> float:
    """Reject inputs whose computed result overflows to infinity"""
    if not math.isfinite(result):
        raise InvalidArgumentError(f"{field} is too large, got {value!r}")
    return result
