from __future__ import annotations

import pytest

from srcloc import OutOfRange, Position, Source, UnknownOrigin
from srcloc.pos import WIDTH_MAX


@pytest.mark.parametrize("value", [0, WIDTH_MAX, 0xDEADBEEF])
def test_from_raw_and_from_size_keep_value(value: int) -> None:
    assert Position.from_raw(value).offset == value
    assert Position.from_size(value).offset == value
    assert Position.from_raw(value).as_raw() == value
    assert Position.from_size(value).as_size() == value


def test_from_size_rejects_values_wider_than_32_bits() -> None:
    with pytest.raises(OutOfRange) as e:
        Position.from_size(WIDTH_MAX + 1)
    assert e.value.value == WIDTH_MAX + 1
    assert "out of range" in str(e.value)


def test_negative_offsets_are_rejected() -> None:
    with pytest.raises(OutOfRange):
        Position.from_raw(-1)
    # OutOfRange is also a ValueError.
    with pytest.raises(ValueError):
        Position(-5)


def test_ordering_and_hashing_follow_offset() -> None:
    a, b = Position(3), Position(7)
    assert a < b <= Position(7)
    assert max(a, b) == b
    assert len({a, Position(3), b}) == 2


def test_position_indexes_text() -> None:
    text = "abcdef"
    assert text[Position(2)] == "c"
    assert text[Position(1) : Position(4)] == "bcd"
    assert int(Position(9)) == 9


def test_of_accepts_int_or_position() -> None:
    p = Position(4)
    assert Position.of(p) is p
    assert Position.of(4) == p


@pytest.mark.parametrize("value", [2.5, 3.0, "4", True])
def test_non_integer_offsets_are_rejected(value: object) -> None:
    with pytest.raises(TypeError):
        Position(value)  # type: ignore[arg-type]


def test_pos_to_loc_rejects_float_offsets() -> None:
    src = Source(UnknownOrigin(), "Hello\nWorld\n")
    with pytest.raises(TypeError):
        src.pos_to_loc(7.5)  # type: ignore[arg-type]
