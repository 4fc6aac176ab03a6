"""Key ranges used while building a trie."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

UINT32_MAX = 0xFFFFFFFF


def _check_u32(name: str, value: int) -> int:
    value = int(value)
    if not 0 <= value <= UINT32_MAX:
        raise ValueError(f"{name} exceeds 32-bit unsigned range: {value}")
    return value


@dataclass
class Range:
    """A half-open slice [begin, end) of sorted keys at a character position."""

    begin: int = 0
    end: int = 0
    key_pos: int = 0

    def __setattr__(self, name: str, value: int) -> None:
        super().__setattr__(name, _check_u32(name, value))


def make_range(begin: int, end: int, key_pos: int) -> Range:
    """Create a Range from its three components."""
    return Range(begin, end, key_pos)


@dataclass(eq=False)
class WeightedRange:
    """A Range carrying a weight; compared and ordered by weight alone.

    Comparisons involving NaN weights treat the left operand as smaller.
    """

    range: Range = field(default_factory=Range)
    weight: float = 0.0

    @property
    def begin(self) -> int:
        return self.range.begin

    @begin.setter
    def begin(self, value: int) -> None:
        self.range.begin = value

    @property
    def end(self) -> int:
        return self.range.end

    @end.setter
    def end(self, value: int) -> None:
        self.range.end = value

    @property
    def key_pos(self) -> int:
        return self.range.key_pos

    @key_pos.setter
    def key_pos(self, value: int) -> None:
        self.range.key_pos = value

    def _cmp(self, other: WeightedRange) -> int:
        a, b = self.weight, other.weight
        if math.isnan(a) or math.isnan(b):
            return -1
        return (a > b) - (a < b)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WeightedRange):
            return NotImplemented
        return self.weight == other.weight

    def __lt__(self, other: WeightedRange) -> bool:
        return self._cmp(other) < 0

    def __le__(self, other: WeightedRange) -> bool:
        return self._cmp(other) <= 0

    def __gt__(self, other: WeightedRange) -> bool:
        return self._cmp(other) > 0

    def __ge__(self, other: WeightedRange) -> bool:
        return self._cmp(other) >= 0

    __hash__ = None  # type: ignore[assignment]


def make_weighted_range(begin: int, end: int, key_pos: int, weight: float) -> WeightedRange:
    """Create a WeightedRange from its components."""
    return WeightedRange(Range(begin, end, key_pos), float(weight))