"""A linear congruential pseudo-random generator with the classic ANSI C constants."""

from __future__ import annotations

_MASK = 0xFFFF_FFFF
_MULTIPLIER = 1_103_515_245
_INCREMENT = 12345


class LinearCongruentialGenerator:
    """Deterministic 32-bit generator; cheap and not of high quality."""

    def __init__(self, seed: int = 0) -> None:
        if not isinstance(seed, int) or isinstance(seed, bool):
            raise TypeError("seed must be an integer")
        if not 0 <= seed <= _MASK:
            raise ValueError(f"seed out of u32 range: {seed}")
        self._state = seed

    @property
    def state(self) -> int:
        """The current 32-bit state, which is also the last value returned."""
        return self._state

    def next_u32(self) -> int:
        """Advance the state with wrapping arithmetic and return it."""
        self._state = (self._state * _MULTIPLIER + _INCREMENT) & _MASK
        return self._state

    def next_bool(self) -> bool:
        return self.next_u32() % 2 != 0

    def next_i32(self) -> int:
        """Return the next value reinterpreted as a signed 32-bit integer."""
        value = self.next_u32()
        return value - (1 << 32) if value >= 1 << 31 else value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(seed={self._state})"