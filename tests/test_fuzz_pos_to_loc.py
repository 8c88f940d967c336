from __future__ import annotations

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from srcloc import Source, UnknownOrigin
from srcloc.testing import linear_pos_to_loc


# Newline-heavy alphabet so texts have many short lines.
texts = st.text(alphabet=st.sampled_from(list("ab \t\r\né中")), max_size=200)


@given(texts)
@settings(
    max_examples=300,
    suppress_health_check=[HealthCheck.too_slow],
)
def test_pos_to_loc_matches_linear_scan(text: str) -> None:
    src = Source(UnknownOrigin(), text)
    for offset in range(len(text) + 2):
        assert src.pos_to_loc(offset) == linear_pos_to_loc(text, offset)


@given(texts)
def test_line_starts_are_strictly_increasing(text: str) -> None:
    starts = Source(UnknownOrigin(), text).line_starts
    assert starts[0] == 0
    assert all(a < b for a, b in zip(starts, starts[1:]))
    assert len(starts) == text.count("\n") + 1
    assert all(text[i - 1] == "\n" for i in starts[1:])
