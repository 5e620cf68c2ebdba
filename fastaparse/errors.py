"""Errors raised while reading and writing FASTA records."""

from __future__ import annotations

import zlib

# Exceptions a line source can raise when a line cannot be produced: I/O
# faults, undecodable bytes, truncated (EOFError) or corrupt (zlib.error) gzip.
READ_ERRORS = (OSError, EOFError, UnicodeDecodeError, zlib.error)


class FastaError(RuntimeError):
    """Base error for this package."""


class FastaReadError(FastaError):
    """Raised when the underlying line source fails to produce a line."""


class ConfigError(FastaError):
    """Raised when a FASTA_* setting cannot be interpreted."""
