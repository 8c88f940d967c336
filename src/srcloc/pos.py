from __future__ import annotations

from dataclasses import dataclass

from .errors import OutOfRange


WIDTH_MAX = 2**32 - 1
IWIDTH_MIN = -(2**31)
IWIDTH_MAX = 2**31 - 1


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """An offset into a source text.

    Offsets are 0-based indices into the text and are limited to 32 bits.
    """

    offset: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.offset, bool) or not isinstance(self.offset, int):
            raise TypeError(f"position offset must be an int, got {type(self.offset).__name__}")
        if not 0 <= self.offset <= WIDTH_MAX:
            raise OutOfRange(self.offset)

    @classmethod
    def from_raw(cls, value: int) -> Position:
        return cls(value)

    @classmethod
    def from_size(cls, value: int) -> Position:
        # Wider values are rejected rather than truncated.
        if value > WIDTH_MAX:
            raise OutOfRange(value, "size")
        return cls(value)

    @classmethod
    def of(cls, value: int | Position) -> Position:
        if isinstance(value, Position):
            return value
        return cls(value)

    def as_raw(self) -> int:
        return self.offset

    def as_size(self) -> int:
        return self.offset

    def __int__(self) -> int:
        return self.offset

    def __index__(self) -> int:
        return self.offset

    def __repr__(self) -> str:
        return f"Position({self.offset})"
