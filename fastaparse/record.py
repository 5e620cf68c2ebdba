"""FASTA record entity, header splitting and canonical text rendering."""

from __future__ import annotations

import io
import re
from dataclasses import dataclass
from typing import IO, Iterable, List, Tuple

HEADER_MARKER = ">"
COMMENT_MARKER = ";"
WRAP_WIDTH = 80
PREVIEW_LENGTH = 40

_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class FastaRecord:
    id: str
    description: str
    sequence: str

    def __str__(self) -> str:
        return self.preview()

    @property
    def header(self) -> str:
        """Header line without the leading marker."""
        if self.description:
            return f"{self.id} {self.description}"
        return self.id

    def format(self, width: int = WRAP_WIDTH) -> str:
        """Render the record as canonical FASTA text wrapped at ``width`` columns.

        The header is ``>{id} {description}``, or just ``>{id}`` (no trailing
        space) when the description is empty. Both forms parse back to the
        same record.
        """
        lines = [f"{HEADER_MARKER}{self.header}"]
        lines.extend(wrap_sequence(self.sequence, width))
        return "\n".join(lines) + "\n"

    def write(self, handle: IO, width: int = WRAP_WIDTH) -> None:
        """Write the rendered record to a text or binary handle."""
        text = self.format(width)
        if isinstance(handle, (io.RawIOBase, io.BufferedIOBase)):
            handle.write(text.encode("utf-8"))
        else:
            handle.write(text)

    def preview(self, length: int = PREVIEW_LENGTH) -> str:
        """Short display form: the header and the first ``length`` residues."""
        return f"{HEADER_MARKER}{self.header}\n{self.sequence[:length]}..."


def split_header(line: str) -> Tuple[str, str]:
    """Split a header line into ``(id, description)``.

    The leading ``>`` is optional. The id runs up to the first whitespace run and
    the description is everything after it. Never fails: an empty header gives
    two empty strings.
    """
    text = line.strip()
    if text.startswith(HEADER_MARKER):
        text = text[1:]
    parts = _WHITESPACE_RE.split(text, maxsplit=1)
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1]


def wrap_sequence(sequence: str, width: int = WRAP_WIDTH) -> List[str]:
    """Cut ``sequence`` into consecutive chunks of ``width`` characters.

    The last chunk may be shorter; no empty chunk is produced.
    """
    if width <= 0:
        raise ValueError(f"wrap width must be positive, got {width}")
    return [sequence[idx : idx + width] for idx in range(0, len(sequence), width)]


def write_fasta(handle: IO, records: Iterable[FastaRecord], width: int = WRAP_WIDTH) -> int:
    """Write records to an open handle and return how many were written."""
    count = 0
    for record in records:
        record.write(handle, width)
        count += 1
    return count
