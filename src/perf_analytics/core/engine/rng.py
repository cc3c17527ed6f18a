from __future__ import annotations

from perf_analytics.core.engine.contract import validate_seed

_MASK = 0xFFFFFFFF
_INCREMENT = 0x6D2B79F5
_TWO_POW_32 = 4294967296.0


def _imul(a: int, b: int) -> int:
    return (a * b) & _MASK


class Mulberry32:
    """Mulberry32 stream over unsigned 32-bit wraparound arithmetic.

    Sequences are bit-identical to any other implementation that keeps the
    state as an unsigned 32-bit integer. Instances are not shareable between
    concurrent callers.
    """

    def __init__(self, seed: int) -> None:
        self.state = validate_seed(seed)

    def next(self) -> float:
        self.state = (self.state + _INCREMENT) & _MASK
        t = self.state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & _MASK
        return ((t ^ (t >> 14)) & _MASK) / _TWO_POW_32

    def randrange(self, n: int) -> int:
        return int(self.next() * n)


def create_rng(seed: int) -> Mulberry32:
    return Mulberry32(seed)
