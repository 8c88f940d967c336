from __future__ import annotations

import logging
from bisect import bisect_right
from dataclasses import dataclass, field
from pathlib import Path

from .errors import IoFailure, OutOfRange
from .loc import Location
from .pos import WIDTH_MAX, Position
from .span import Span


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PathOrigin:
    path: Path

    def __str__(self) -> str:
        return str(self.path)


@dataclass(frozen=True, slots=True)
class NamedOrigin:
    """A named in-memory document, e.g. an unsaved editor buffer."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class UnknownOrigin:
    def __str__(self) -> str:
        return "<unknown>"


Origin = PathOrigin | NamedOrigin | UnknownOrigin


def scan_lines(text: str) -> tuple[int, ...]:
    """Offsets at which each line of `text` starts.

    The first line starts at 0 and every '\\n' starts a new line right after
    it, so a trailing newline yields a final entry equal to `len(text)`.
    """
    starts = [0]
    i = text.find("\n")
    while i != -1:
        starts.append(i + 1)
        i = text.find("\n", i + 1)
    return tuple(starts)


@dataclass(frozen=True, slots=True)
class Source:
    """Source text together with where it came from.

    Never mutated after construction; `line_starts` is derived from `text`.
    """

    origin: Origin
    text: str
    line_starts: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.text) > WIDTH_MAX:
            raise OutOfRange(len(self.text), "source length")
        object.__setattr__(self, "line_starts", scan_lines(self.text))

    @classmethod
    def from_file(cls, path: str | Path) -> Source:
        p = Path(path)
        try:
            # newline="" keeps "\r\n" intact so offsets match the file.
            with p.open(encoding="utf-8", newline="") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise IoFailure(path=str(p), cause=e) from e
        src = cls(PathOrigin(p), text)
        logger.debug("loaded %s (%d chars, %d lines)", p, len(text), src.line_count)
        return src

    @property
    def line_count(self) -> int:
        return len(self.line_starts)

    def pos_to_loc(self, pos: int | Position) -> Location | None:
        """Location of `pos`, or None when it is at or past the end of the text."""
        offset = Position.of(pos).offset
        if offset >= len(self.text):
            return None
        line = bisect_right(self.line_starts, offset) - 1
        return Location(line, Position(offset - self.line_starts[line]))

    def line_span(self, line: int) -> Span | None:
        if not 0 <= line < len(self.line_starts):
            return None
        start = self.line_starts[line]
        if line + 1 < len(self.line_starts):
            end = self.line_starts[line + 1] - 1
        else:
            end = len(self.text)
        return Span(start, end)

    def line_text(self, line: int) -> str | None:
        span = self.line_span(line)
        if span is None:
            return None
        return self.text[span.to_slice()]

    def slice(self, span: Span) -> str:
        if span.high.offset > len(self.text):
            raise OutOfRange(span.high.offset, "span end")
        return self.text[span.to_slice()]

    def span_to_locs(self, span: Span) -> tuple[Location | None, Location | None]:
        return self.pos_to_loc(span.low), self.pos_to_loc(span.high)

    def describe(self, pos: int | Position) -> str:
        loc = self.pos_to_loc(pos)
        if loc is None:
            return f"{self.origin}:<eof>"
        return f"{self.origin}:{loc}"
