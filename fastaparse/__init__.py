"""Streaming and batch FASTA parsing with canonical wrapped output."""

from .errors import ConfigError, FastaError, FastaReadError
from .lines import PeekableLines
from .parser import FastaReader, LineKind, RecordAssembler, classify_line, parse_fasta
from .record import WRAP_WIDTH, FastaRecord, split_header, wrap_sequence, write_fasta

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "FastaError",
    "FastaReadError",
    "FastaReader",
    "FastaRecord",
    "LineKind",
    "PeekableLines",
    "RecordAssembler",
    "WRAP_WIDTH",
    "classify_line",
    "parse_fasta",
    "split_header",
    "wrap_sequence",
    "write_fasta",
    "__version__",
]
