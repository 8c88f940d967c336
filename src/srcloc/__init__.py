from __future__ import annotations

from .api import load_source, locate, source_from_text
from .errors import ArithmeticOverflow, ArithmeticUnderflow, IoFailure, OutOfRange, SrclocError
from .loc import Location
from .pos import Position
from .source import NamedOrigin, Origin, PathOrigin, Source, UnknownOrigin
from .span import Span

__all__ = [
    "ArithmeticOverflow",
    "ArithmeticUnderflow",
    "IoFailure",
    "Location",
    "NamedOrigin",
    "Origin",
    "OutOfRange",
    "PathOrigin",
    "Position",
    "Source",
    "Span",
    "SrclocError",
    "UnknownOrigin",
    "load_source",
    "locate",
    "source_from_text",
]
