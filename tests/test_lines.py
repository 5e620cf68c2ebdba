"""Tests for the one-line lookahead wrapper."""

from __future__ import annotations

import io
import zlib

import pytest

from fastaparse.lines import PeekableLines


def test_peek_is_repeatable_and_does_not_advance() -> None:
    lines = PeekableLines(["first", "second"])
    assert lines.peek() == "first"
    assert lines.peek() == "first"
    assert lines.advance() == "first"
    assert lines.peek() == "second"


def test_exhausted_source_returns_none() -> None:
    lines = PeekableLines(["only"])
    assert not lines.exhausted
    lines.advance()
    assert lines.peek() is None
    assert lines.advance() is None
    assert lines.exhausted


def test_empty_source() -> None:
    lines = PeekableLines([])
    assert lines.peek() is None
    assert lines.exhausted


def test_peek_pulls_lazily(flaky_lines) -> None:
    source = flaky_lines(["a", "b", "c"])
    lines = PeekableLines(source)
    assert source.pulled == []
    lines.peek()
    lines.peek()
    assert source.pulled == ["a"]


def test_read_failure_repeats_until_advanced(flaky_lines) -> None:
    lines = PeekableLines(flaky_lines(["a", OSError("disk"), "b"]))
    lines.advance()
    with pytest.raises(OSError):
        lines.peek()
    with pytest.raises(OSError):
        lines.peek()
    assert lines.advance() is None
    assert lines.peek() == "b"


def test_decode_failure_is_kept_as_read_failure(flaky_lines) -> None:
    error = UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
    lines = PeekableLines(flaky_lines([error]))
    with pytest.raises(UnicodeDecodeError):
        lines.peek()


@pytest.mark.parametrize("error", [EOFError("truncated"), zlib.error("bad deflate")])
def test_decompression_failures_are_kept_as_read_failures(flaky_lines, error) -> None:
    lines = PeekableLines(flaky_lines([error, "a"]))
    with pytest.raises(type(error)):
        lines.peek()
    lines.advance()
    assert lines.peek() == "a"


def test_close_forwards_to_wrapped_handle() -> None:
    handle = io.StringIO("a\nb\n")
    lines = PeekableLines(handle)
    lines.close()
    assert handle.closed


def test_close_ignores_plain_iterables() -> None:
    PeekableLines(["a"]).close()
