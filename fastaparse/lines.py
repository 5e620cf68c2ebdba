"""Line source with one line of lookahead."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from .errors import READ_ERRORS

_MISSING = object()


class PeekableLines:
    """Wrap an iterable of text lines so the next line can be inspected before it is consumed.

    ``peek()`` returns the next line without moving, as many times as needed.
    ``advance()`` drops that line and is the only call that changes position.
    Both return ``None`` once the wrapped iterable is exhausted.

    If the wrapped iterator raises while producing a line, the exception is
    kept in place of the line: every ``peek()`` raises it again until
    ``advance()`` discards it.
    """

    def __init__(self, lines: Iterable[str]):
        self._source = lines
        self._iter: Iterator[str] = iter(lines)
        self._head: object = _MISSING
        self._error: Optional[BaseException] = None
        self._done = False

    def __repr__(self) -> str:
        return f"PeekableLines(exhausted={self.exhausted})"

    @property
    def exhausted(self) -> bool:
        self._fill()
        return self._done

    def peek(self) -> Optional[str]:
        self._fill()
        if self._error is not None:
            raise self._error
        if self._done:
            return None
        return self._head  # type: ignore[return-value]

    def advance(self) -> Optional[str]:
        """Consume the current line and return it (``None`` if it was a failure or the end)."""
        self._fill()
        if self._done:
            return None
        line = None if self._error is not None else self._head
        self._head = _MISSING
        self._error = None
        return line  # type: ignore[return-value]

    def close(self) -> None:
        """Close the wrapped iterable when it is file-like."""
        close = getattr(self._source, "close", None)
        if callable(close):
            close()

    def _fill(self) -> None:
        if self._done or self._head is not _MISSING or self._error is not None:
            return
        try:
            self._head = next(self._iter)
        except StopIteration:
            self._done = True
        except READ_ERRORS as exc:
            self._error = exc
