"""Command-line interface for fastaparse."""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Iterable, List, Optional

from . import __version__
from .config import FastaSettings, collect_settings
from .errors import FastaError
from .io import open_fasta, open_reader, save_fasta
from .logging_utils import configure_logging, get_logger
from .parser import parse_fasta
from .record import FastaRecord, write_fasta

logger = get_logger("cli")


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}") from exc
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fastaparse",
        description="Parse FASTA files lazily or in one pass and re-emit canonical wrapped FASTA.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("--quiet", action="store_true", help="Only log warnings and errors.")
    subparsers = parser.add_subparsers(dest="command", metavar="command")

    stats_parser = subparsers.add_parser(
        "stats",
        help="Time both parsers on a FASTA file and summarise its records.",
    )
    stats_parser.add_argument("fasta", type=Path, help="Input FASTA file (.gz is decompressed).")
    stats_parser.add_argument(
        "--head",
        type=_positive_int,
        default=None,
        help="Number of records to preview (default: FASTA_PREVIEW_RECORDS or 5).",
    )
    stats_parser.set_defaults(handler=_handle_stats)

    show_parser = subparsers.add_parser("show", help="Print a short preview of every record.")
    show_parser.add_argument("fasta", type=Path, help="Input FASTA file (.gz is decompressed).")
    show_parser.add_argument(
        "--length",
        type=_positive_int,
        default=None,
        help="Residues shown per record (default: FASTA_PREVIEW_LENGTH or 40).",
    )
    show_parser.set_defaults(handler=_handle_show)

    format_parser = subparsers.add_parser("format", help="Re-emit records as canonical wrapped FASTA.")
    format_parser.add_argument("fasta", type=Path, help="Input FASTA file (.gz is decompressed).")
    format_parser.add_argument("--out", type=Path, default=None, help="Output path (default: stdout).")
    format_parser.add_argument(
        "--width",
        type=_positive_int,
        default=None,
        help="Line width for sequence data (default: FASTA_WRAP_WIDTH or 80).",
    )
    format_parser.set_defaults(handler=_handle_format)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    if not hasattr(args, "handler"):
        parser.print_help()
        return 0

    configure_logging(verbose=args.verbose, quiet=args.quiet)
    try:
        settings = collect_settings()
        return args.handler(args, settings)
    except FileNotFoundError as exc:
        logger.error("%s", exc)
        return 2
    except (FastaError, ValueError) as exc:
        logger.error("%s", exc)
        return 1


def _handle_stats(args: argparse.Namespace, settings: FastaSettings) -> int:
    head = args.head if args.head is not None else settings.preview_records

    start = time.perf_counter()
    with open_reader(args.fasta) as reader:
        streamed: List[FastaRecord] = list(reader)
    streamed_elapsed = time.perf_counter() - start
    print(f"Time elapsed to parse records via FastaReader: {streamed_elapsed:.6f}s")
    print(f"Number of records: {len(streamed)}")

    start = time.perf_counter()
    with open_fasta(args.fasta) as handle:
        batched = parse_fasta(handle, skip_unreadable=settings.skip_unreadable)
    batched_elapsed = time.perf_counter() - start
    print(f"Time elapsed to parse records via parse_fasta: {batched_elapsed:.6f}s")
    print(f"Number of records: {len(batched)}")

    total = sum(len(record.sequence) for record in streamed)
    print(f"Total size of sequence data: {total}")

    print(f"\nFirst {head} records, FastaReader:")
    for record in streamed[:head]:
        print(record.preview(settings.preview_length))
    print(f"\nFirst {head} records, parse_fasta:")
    for record in batched[:head]:
        print(record.preview(settings.preview_length))

    if len(streamed) != len(batched):
        logger.warning("Parsers disagree: %d streamed vs %d batched records.", len(streamed), len(batched))
    return 0


def _handle_show(args: argparse.Namespace, settings: FastaSettings) -> int:
    length = args.length if args.length is not None else settings.preview_length
    count = 0
    with open_reader(args.fasta) as reader:
        for record in reader:
            print(record.preview(length))
            count += 1
    logger.info("Displayed %d records.", count)
    return 0


def _handle_format(args: argparse.Namespace, settings: FastaSettings) -> int:
    width = args.width if args.width is not None else settings.wrap_width
    with open_reader(args.fasta) as reader:
        if args.out is None:
            count = write_fasta(sys.stdout, reader, width)
        else:
            count = save_fasta(args.out, reader, width)
    logger.info("Formatted %d records at width %d.", count, width)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
