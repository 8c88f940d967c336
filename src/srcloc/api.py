from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from .pos import Position
from .source import NamedOrigin, Source, UnknownOrigin


def source_from_text(text: str, *, name: str | None = None) -> Source:
    origin = UnknownOrigin() if name is None else NamedOrigin(name)
    return Source(origin, text)


def load_source(path: str | Path) -> Source:
    return Source.from_file(Path(path).expanduser())


def locate(source: Source, offsets: Iterable[int | Position]) -> list[str]:
    """Render each offset as `origin:line:col` (1-indexed)."""
    return [source.describe(o) for o in offsets]
