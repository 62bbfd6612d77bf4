"""Seeded pseudo-random stream with 32-bit wraparound arithmetic."""

from __future__ import annotations

_MASK = 0xFFFFFFFF
_INCREMENT = 0x6D2B79F5
_SCALE = 4294967296.0


def _imul(a: int, b: int) -> int:
    return (a * b) & _MASK


class RandomStream:
    """Mulberry32 generator yielding floats in ``[0, 1)``.

    The output depends only on the seed and the number of draws, so two
    streams built from the same seed produce the same sequence.
    """

    __slots__ = ("_state",)

    def __init__(self, seed: int) -> None:
        self._state = seed & _MASK

    def next(self) -> float:
        self._state = (self._state + _INCREMENT) & _MASK
        t = self._state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & _MASK
        return ((t ^ (t >> 14)) & _MASK) / _SCALE

    def centered(self, span: float) -> float:
        """Draw a value uniformly spread over ``[-span / 2, span / 2)``."""
        return (self.next() - 0.5) * span
