"""FASTA file helpers with transparent gzip support."""

from __future__ import annotations

import gzip
import logging
from pathlib import Path
from typing import IO, Iterable, Iterator, List, Union

from ..parser import FastaReader, parse_fasta
from ..record import WRAP_WIDTH, FastaRecord, write_fasta

logger = logging.getLogger("fastaparse.io")

PathLike = Union[str, Path]


def open_fasta(path: PathLike, mode: str = "r") -> IO[str]:
    """Open a FASTA file as text, going through gzip when the name ends in ``.gz``.

    Reading drops a leading UTF-8 byte order mark; writing never adds one.
    """
    path = Path(path)
    if mode not in ("r", "w"):
        raise ValueError(f"unsupported mode: {mode!r}")
    encoding = "utf-8-sig" if mode == "r" else "utf-8"
    logger.debug("Opening %s (mode %s)", path, mode)
    if path.suffix == ".gz":
        return gzip.open(path, mode + "t", encoding=encoding)
    return path.open(mode, encoding=encoding)


def open_reader(path: PathLike) -> FastaReader:
    """Return a lazy reader over a FASTA file; close it (or use ``with``) when done."""
    return FastaReader(open_fasta(path))


def iter_fasta(path: PathLike) -> Iterator[FastaRecord]:
    """Yield records from a FASTA file one at a time."""
    with open_reader(path) as reader:
        yield from reader


def read_fasta(path: PathLike, skip_unreadable: bool = False) -> List[FastaRecord]:
    """Read a FASTA file into a list of records."""
    with open_fasta(path) as handle:
        return parse_fasta(handle, skip_unreadable=skip_unreadable)


def save_fasta(path: PathLike, records: Iterable[FastaRecord], width: int = WRAP_WIDTH) -> int:
    """Write records to ``path`` in canonical wrapped form and return the record count."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open_fasta(path, "w") as handle:
        count = write_fasta(handle, records, width)
    logger.debug("Wrote %d records to %s", count, path)
    return count
