"""Command-line interface for buffer split."""

import argparse
import logging
import sys
from typing import Any

from buffer_split.errors import SplitError
from buffer_split.orchestrator import split_sync

logger = logging.getLogger(__name__)

# Lines per piece when no splitting mode is given.
DEFAULT_LINES = 1000


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure logging to write to stderr."""
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="buffer-split",
        description="Output pieces of INPUT to PREFIXaa, PREFIXab, ...",
    )

    parser.add_argument(
        "input_file",
        nargs="?",
        default="-",
        help='Path to the input file, "-" for standard input (default: -)',
    )
    parser.add_argument(
        "prefix",
        nargs="?",
        default="x",
        help="Output file name prefix (default: x)",
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "-l",
        "--lines",
        type=int,
        help=f"Put LINES lines per output file (default: {DEFAULT_LINES})",
    )
    mode.add_argument(
        "-b",
        "--bytes",
        help="Put SIZE bytes per output file, e.g. 512, 10K, 1MB",
    )
    mode.add_argument(
        "-C",
        "--line-bytes",
        help="Put at most SIZE bytes of lines per output file",
    )

    parser.add_argument(
        "-a",
        "--suffix-length",
        type=int,
        help="Generate suffixes of length N (default: as needed, at least 2)",
    )
    parser.add_argument(
        "-d",
        dest="numeric_suffixes",
        action="store_const",
        const=0,
        help="Use numeric suffixes starting at 0",
    )
    parser.add_argument(
        "--numeric-suffixes",
        dest="numeric_suffixes",
        type=int,
        metavar="FROM",
        help="Use numeric suffixes starting at FROM",
    )
    parser.add_argument(
        "--additional-suffix",
        default="",
        help="Append an additional suffix to file names",
    )
    parser.add_argument(
        "--strict-suffixes",
        action="store_true",
        help="Fail instead of truncating numeric suffixes wider than the suffix length",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )

    return parser


def build_options(args: argparse.Namespace) -> dict[str, Any]:
    """Translate parsed arguments into a split options mapping."""
    options: dict[str, Any] = {
        "prefix": args.prefix,
        "suffix_length": args.suffix_length,
        "numeric_suffixes": args.numeric_suffixes,
        "additional_suffix": args.additional_suffix,
        "strict_suffixes": args.strict_suffixes,
    }

    if args.bytes is not None:
        options["bytes"] = args.bytes
    elif args.line_bytes is not None:
        options["line_bytes"] = args.line_bytes
    else:
        options["lines"] = args.lines if args.lines is not None else DEFAULT_LINES

    return options


def read_input(input_file: str) -> bytes:
    """Read the whole input file, or standard input for "-"."""
    if input_file == "-":
        return sys.stdin.buffer.read()
    with open(input_file, "rb") as handle:
        return handle.read()


def main(argv: list[str] | None = None) -> int:
    """Entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Configure logging based on --log-level
    log_level = getattr(logging, args.log_level)
    configure_logging(log_level)

    options = build_options(args)

    try:
        buffer = read_input(args.input_file)
        split_sync(buffer, options)
    except SplitError as exc:
        parser.error(str(exc))
    except OSError as exc:
        logger.error("%s", exc)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
