"""FASTA record recognition.

Both parsers share :class:`RecordAssembler`, the whole record-recognition
state machine. Each input line is stripped and classified by its first
character:

    ``;``      comment, ignored anywhere
    nothing    blank, ignored anywhere
    ``>``      header, opens a record (and closes the active one)
    other      sequence data for the active record

:class:`FastaReader` pulls lines lazily through :class:`~fastaparse.lines.PeekableLines`
and yields one record per ``next()``. :func:`parse_fasta` consumes the
whole input and returns every record at once.
"""

from __future__ import annotations

import enum
import logging
from typing import Iterable, Iterator, List, Optional, Tuple

from .errors import READ_ERRORS, FastaReadError
from .lines import PeekableLines
from .record import COMMENT_MARKER, HEADER_MARKER, FastaRecord, split_header

logger = logging.getLogger("fastaparse.parser")

MAX_CONSECUTIVE_FAILURES = 3


class LineKind(enum.Enum):
    COMMENT = "comment"
    BLANK = "blank"
    HEADER = "header"
    SEQUENCE = "sequence"


def classify_line(line: str) -> LineKind:
    text = line.lstrip()
    if not text:
        return LineKind.BLANK
    if text[0] == COMMENT_MARKER:
        return LineKind.COMMENT
    if text[0] == HEADER_MARKER:
        return LineKind.HEADER
    return LineKind.SEQUENCE


class RecordAssembler:
    """Incremental record builder shared by the lazy and the eager parser.

    State is a single ``active`` flag plus the record being accumulated.
    ``step()`` reports whether the line was consumed: a header seen while a
    record is active is *not* consumed, the active record is returned instead
    and the caller must feed the same line again to open the next record.
    """

    def __init__(self) -> None:
        self.active = False
        self.orphan_lines = 0
        self._id = ""
        self._description = ""
        self._chunks: List[str] = []

    def step(self, line: str) -> Tuple[bool, Optional[FastaRecord]]:
        text = line.strip()
        kind = classify_line(text)
        if kind is LineKind.COMMENT or kind is LineKind.BLANK:
            return True, None
        if kind is LineKind.HEADER:
            if self.active:
                return False, self._emit()
            self._start(text)
            return True, None
        if self.active:
            self._chunks.append(text)
        else:
            if not self.orphan_lines:
                logger.warning("Ignoring sequence data found before the first header.")
            self.orphan_lines += 1
        return True, None

    def finish(self) -> Optional[FastaRecord]:
        """Close the input: return the active record, if any."""
        if self.active:
            return self._emit()
        return None

    def _start(self, header: str) -> None:
        self._id, self._description = split_header(header)
        self._chunks = []
        self.active = True

    def _emit(self) -> FastaRecord:
        record = FastaRecord(id=self._id, description=self._description, sequence="".join(self._chunks))
        self.active = False
        self._id = ""
        self._description = ""
        self._chunks = []
        logger.debug("Record %s complete (%d residues).", record.id, len(record.sequence))
        return record


class FastaReader:
    """Lazy iterator over the FASTA records of a line source.

    Only as many lines are read as needed to complete the next record. A line
    the source fails to produce raises :class:`FastaReadError` for that call;
    the failing line is dropped and the record in progress is kept, so
    iteration may continue afterwards.
    """

    def __init__(self, lines: Iterable[str]):
        _check_not_text(lines)
        self._lines = lines if isinstance(lines, PeekableLines) else PeekableLines(lines)
        self._assembler = RecordAssembler()

    def __iter__(self) -> Iterator[FastaRecord]:
        return self

    def __next__(self) -> FastaRecord:
        while True:
            try:
                line = self._lines.peek()
            except READ_ERRORS as exc:
                self._lines.advance()
                raise FastaReadError("IO error while parsing FASTA records.") from exc

            if line is None:
                record = self._assembler.finish()
                if record is None:
                    raise StopIteration
                return record

            consumed, record = self._assembler.step(line)
            if consumed:
                self._lines.advance()
            if record is not None:
                return record

    def __enter__(self) -> "FastaReader":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Close the wrapped source when it is a file-like object."""
        self._lines.close()


def parse_fasta(lines: Iterable[str], skip_unreadable: bool = False) -> List[FastaRecord]:
    """Read every record from ``lines`` and return them in input order.

    A line-read failure raises :class:`FastaReadError` unless
    ``skip_unreadable`` is set, in which case the line is treated as absent.
    A source that fails :data:`MAX_CONSECUTIVE_FAILURES` times in a row (a
    truncated gzip stream, for instance) raises even when skipping.
    """
    _check_not_text(lines)
    assembler = RecordAssembler()
    records: List[FastaRecord] = []
    for line in _iter_readable(lines, skip_unreadable):
        consumed = False
        while not consumed:
            consumed, record = assembler.step(line)
            if record is not None:
                records.append(record)
    last = assembler.finish()
    if last is not None:
        records.append(last)
    return records


def _check_not_text(lines: object) -> None:
    if isinstance(lines, (str, bytes, bytearray)):
        raise TypeError(
            f"expected an iterable of lines, got {type(lines).__name__}; "
            "use text.splitlines() or io.StringIO(text)"
        )


def _iter_readable(lines: Iterable[str], skip_unreadable: bool) -> Iterator[str]:
    iterator = iter(lines)
    failures = 0
    while True:
        try:
            line = next(iterator)
        except StopIteration:
            return
        except READ_ERRORS as exc:
            failures += 1
            if not skip_unreadable or failures >= MAX_CONSECUTIVE_FAILURES:
                raise FastaReadError("IO error while parsing FASTA records.") from exc
            logger.warning("Skipping unreadable line: %s", exc)
            continue
        failures = 0
        yield line
