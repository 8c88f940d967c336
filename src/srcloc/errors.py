from __future__ import annotations

from dataclasses import dataclass


class SrclocError(Exception):
    """Base class for every error raised by srcloc."""


@dataclass(slots=True)
class IoFailure(SrclocError):
    path: str
    cause: OSError | UnicodeDecodeError

    def __str__(self) -> str:
        return f"{self.path}: cannot read source: {self.cause}"


@dataclass(slots=True)
class OutOfRange(SrclocError, ValueError):
    """An offset or amount does not fit the fixed-width integer it is stored in."""

    value: int
    what: str = "offset"

    def __str__(self) -> str:
        return f"{self.what} out of range: {self.value}"


@dataclass(slots=True)
class ArithmeticOverflow(SrclocError, ArithmeticError):
    value: int
    endpoint: str = "position"

    def __str__(self) -> str:
        return f"width overflow while shifting `{self.endpoint}` (result {self.value})"


@dataclass(slots=True)
class ArithmeticUnderflow(SrclocError, ArithmeticError):
    value: int
    endpoint: str = "position"

    def __str__(self) -> str:
        return f"width underflow while shifting `{self.endpoint}` (result {self.value})"
