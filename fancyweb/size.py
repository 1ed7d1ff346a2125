"""Width/height pairs and the integer conversions used with them."""

from __future__ import annotations

import math
from dataclasses import dataclass

U32_MAX = 0xFFFF_FFFF


def _check_u32(value: int, what: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{what} must be an integer, not {type(value).__name__}")
    if not 0 <= value <= U32_MAX:
        raise ValueError(f"{what} out of u32 range: {value}")
    return value


@dataclass(frozen=True, kw_only=True)
class SizeF64:
    """Width and height as floating-point numbers."""

    height: float = 0.0
    width: float = 0.0


@dataclass(frozen=True, kw_only=True)
class SizeU32:
    """Width and height as unsigned 32-bit integers.

    Integer sizes keep canvas dimensions free of rendering artefacts.
    """

    height: int = 0
    width: int = 0

    def __post_init__(self) -> None:
        _check_u32(self.height, "height")
        _check_u32(self.width, "width")


def f64_to_u32_saturating(value: float) -> int:
    """Truncate toward zero, clamping to the u32 range; NaN becomes zero."""
    if math.isnan(value) or value <= 0.0:
        return 0
    if value >= U32_MAX + 1:
        return U32_MAX
    return int(value)


def u32_to_usize(value: int) -> int:
    """Widen a u32 to an index; rejects values outside the u32 range."""
    return _check_u32(value, "value")


def usize_to_u32(value: int) -> int:
    """Narrow an index to a u32, raising OverflowError if it does not fit."""
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"value must be an integer, not {type(value).__name__}")
    if value < 0:
        raise ValueError(f"value must not be negative: {value}")
    if value > U32_MAX:
        raise OverflowError("overflow")
    return value