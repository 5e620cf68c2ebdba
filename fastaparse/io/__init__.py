"""IO helpers for fastaparse."""

from .fasta import iter_fasta, open_fasta, open_reader, read_fasta, save_fasta

__all__ = [
    "open_fasta",
    "open_reader",
    "iter_fasta",
    "read_fasta",
    "save_fasta",
]
