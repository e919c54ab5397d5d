# topmark:header:start
#
#   project      : Embedres
#   file         : test_lines.py
#   file_relpath : tests/subformats/test_lines.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the lines subformat (lists of string literals)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from hypothesis import given, settings
from hypothesis import strategies as st

from embedres.document import pretty
from embedres.literals import parse_list_literal
from embedres.subformats.lines import LinesSubFormat, split_lines
from embedres.subformats.registry import get_subformat
from tests.conftest import parametrize
from tests.strategies_embedres import s_line

if TYPE_CHECKING:
    from embedres.subformats.base import SubFormat

PATH: tuple[str, ...] = ("docs", "notes.txt")


def _render(sub: SubFormat[Any], value: list[bytes], *, width: int = 80, column: int = 0) -> str:
    return pretty(sub.pprint(column, width, PATH, value), width)


@parametrize(
    "data, expected",
    [
        (b"", []),
        (b"\n", []),
        (b"a", [b"a"]),
        (b"a\n", [b"a"]),
        (b"\na", [b"a"]),
        (b"a\nb\nc\n", [b"a", b"b", b"c"]),
        (b"a\n\nb", [b"a", b"", b"b"]),
        (b"a\rb", [b"a", b"b"]),
        (b"a\r\nb", [b"a", b"", b"b"]),
        (b"a\n\n", [b"a", b""]),
    ],
)
def test_split_lines(data: bytes, expected: list[bytes]) -> None:
    """CR and LF both separate; only one separator at each end is ignored."""
    assert split_lines(data) == expected


def test_three_lines_render_flat() -> None:
    """A short list fits on one line."""
    sub = get_subformat("lines")
    value = sub.from_raw(PATH, b"a\nb\nc\n")
    assert _render(sub, value) == '[ "a" ; "b" ; "c" ]'


def test_empty_list_renders_as_brackets() -> None:
    """Empty content is the empty list literal."""
    sub = get_subformat("lines")
    assert _render(sub, sub.from_raw(PATH, b"")) == "[]"
    assert parse_list_literal("[]") == []


def test_long_list_breaks_one_element_per_line() -> None:
    """A list that does not fit puts each element on its own indented line."""
    sub = get_subformat("lines")
    rendered = _render(sub, [b"alpha", b"beta"], width=10)
    assert rendered == '[ "alpha" ;\n  "beta" ]'
    assert parse_list_literal(rendered) == [b"alpha", b"beta"]


def test_crlf_content_does_not_round_trip() -> None:
    """CRLF line endings yield an extra empty line and are rewritten as LF."""
    sub = get_subformat("lines")
    value = sub.from_raw(PATH, b"a\r\nb")
    assert value == [b"a", b"", b"b"]
    assert sub.to_raw(PATH, value) == b"a\n\nb"


def test_lf_content_round_trips_without_final_newline() -> None:
    """LF-separated content is rebuilt with LF; a final newline is dropped."""
    sub = get_subformat("lines")
    assert sub.to_raw(PATH, sub.from_raw(PATH, b"one\ntwo")) == b"one\ntwo"
    assert sub.to_raw(PATH, sub.from_raw(PATH, b"one\ntwo\n")) == b"one\ntwo"


@settings(deadline=None, max_examples=100)
@given(
    lines=st.lists(s_line(), min_size=1, max_size=12),
    width=st.integers(20, 100),
)
def test_rendered_list_reads_back(lines: list[bytes], width: int) -> None:
    """Rendered lists read back to the same lines at any reasonable width."""
    sub = get_subformat("lines")
    assert parse_list_literal(_render(sub, lines, width=width)) == lines


def test_lines_subformat_metadata() -> None:
    """Lines values are run-time string lists."""
    sub = get_subformat("lines")
    assert isinstance(sub, LinesSubFormat)
    info = sub.describe(PATH, [])
    assert (info.name, info.type_name, info.mod_name) == (
        "lines",
        "string list",
        "EmbedresSubformats.Lines",
    )
