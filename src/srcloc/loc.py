from __future__ import annotations

from dataclasses import dataclass

from .pos import Position


@dataclass(frozen=True, slots=True, order=True)
class Location:
    """A zero-indexed line/column pair inside a source.

    Rendered 1-indexed for user-facing messages.
    """

    line: int
    column: Position

    def __post_init__(self) -> None:
        if not isinstance(self.column, Position):
            object.__setattr__(self, "column", Position.of(self.column))

    def __str__(self) -> str:
        return f"{self.line + 1}:{self.column.offset + 1}"
