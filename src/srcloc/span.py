from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .errors import ArithmeticOverflow, ArithmeticUnderflow, OutOfRange
from .pos import IWIDTH_MAX, IWIDTH_MIN, WIDTH_MAX, Position


def _shifted(pos: Position, amount: int, endpoint: str) -> Position:
    if not IWIDTH_MIN <= amount <= IWIDTH_MAX:
        raise OutOfRange(amount, "shift amount")
    value = pos.offset + amount
    if value < 0:
        raise ArithmeticUnderflow(value, endpoint)
    if value > WIDTH_MAX:
        raise ArithmeticOverflow(value, endpoint)
    return Position(value)


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open span [low, high) of positions.

    If `low` is greater than `high` the endpoints are swapped, so a span is
    never inverted. Endpoints may be given as ints.
    """

    low: Position
    high: Position

    def __post_init__(self) -> None:
        low, high = Position.of(self.low), Position.of(self.high)
        if low > high:
            low, high = high, low
        object.__setattr__(self, "low", low)
        object.__setattr__(self, "high", high)

    @classmethod
    def from_range(cls, r: range | slice | tuple[int | Position, int | Position]) -> Span:
        """Build a span from a native half-open range.

        `range` and `slice` must run forward; a reversed one is empty in Python
        and is rejected rather than swapped. A `(low, high)` pair is normalized
        like the constructor.
        """
        if isinstance(r, range):
            if r.step != 1:
                raise ValueError(f"span ranges must have step 1, got {r.step}")
            if r.start > r.stop:
                raise ValueError(f"span ranges must not be reversed, got {r!r}")
            return cls(Position.from_size(r.start), Position.from_size(r.stop))
        if isinstance(r, slice):
            if r.step not in (None, 1):
                raise ValueError(f"span slices must have step 1, got {r.step}")
            if r.start is None or r.stop is None:
                raise ValueError("span slices need an explicit start and stop")
            if Position.of(r.start) > Position.of(r.stop):
                raise ValueError(f"span slices must not be reversed, got {r!r}")
            return cls(r.start, r.stop)
        low, high = r
        return cls(low, high)

    def with_low(self, low: int | Position) -> Span:
        return Span(low, self.high)

    def with_high(self, high: int | Position) -> Span:
        return Span(self.low, high)

    def shift_by(self, amount: int) -> Span:
        """Shift both endpoints by `amount`.

        Raises ArithmeticUnderflow/ArithmeticOverflow instead of wrapping.
        """
        return Span(_shifted(self.low, amount, "low"), _shifted(self.high, amount, "high"))

    def shift_low_by(self, amount: int) -> Span:
        return Span(_shifted(self.low, amount, "low"), self.high)

    def shift_high_by(self, amount: int) -> Span:
        return Span(self.low, _shifted(self.high, amount, "high"))

    def union(self, other: Span) -> Span:
        """Smallest span enclosing both spans, including any gap between them."""
        return Span(min(self.low, other.low), max(self.high, other.high))

    def __or__(self, other: Span) -> Span:
        if not isinstance(other, Span):
            return NotImplemented
        return self.union(other)

    @property
    def is_empty(self) -> bool:
        return self.low == self.high

    @property
    def width(self) -> int:
        return self.high.offset - self.low.offset

    def __contains__(self, pos: int | Position) -> bool:
        offset = pos.offset if isinstance(pos, Position) else pos
        return self.low.offset <= offset < self.high.offset

    def to_range(self) -> range:
        return range(self.low.offset, self.high.offset)

    def to_slice(self) -> slice:
        return slice(self.low.offset, self.high.offset)

    def positions(self) -> Iterator[Position]:
        for offset in self.to_range():
            yield Position(offset)

    def __repr__(self) -> str:
        return f"Span({self.low.offset}..{self.high.offset})"
