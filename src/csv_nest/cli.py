"""``csv-nest`` command: convert a CSV file into a JSON array of documents.

Also runnable as ``python -m csv_nest``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .assembler import assemble_rows
from .config import ConvertConfig
from .errors import CsvNestError
from .reader import DEFAULT_ENCODING, open_binary_table, open_table
from .values import VDict
from .writer import to_json, write_json

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------

def _open_input(config: ConvertConfig):
    if config.from_stdin:
        return open_binary_table(
            sys.stdin.buffer, delimiter=config.delimiter, encoding=config.encoding,
        )
    return open_table(config.input, delimiter=config.delimiter, encoding=config.encoding)


def convert(config: ConvertConfig) -> list[VDict]:
    """Read the input named by *config* and return one document per row."""
    with _open_input(config) as table:
        return list(assemble_rows(
            table.headers,
            table.rows,
            config.separator,
            legacy=config.legacy_paths,
            skip_malformed=not config.strict,
        ))


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="csv-nest",
        description="Convert a CSV file into a JSON array, one object per row.",
    )
    parser.add_argument(
        "-i",
        "--in",
        dest="input",
        required=True,
        help="The csv file to read ('-' for standard input)",
    )
    parser.add_argument(
        "-d",
        "--dimensional-separator",
        dest="separator",
        default=None,
        help="A separator to break header names allowing you to create deeper objects",
    )
    parser.add_argument(
        "-o",
        "--out-dir",
        type=Path,
        default=None,
        help="Write <input name>.json into this directory instead of printing",
    )
    parser.add_argument(
        "--compact",
        action="store_true",
        help="Emit JSON on a single line",
    )
    parser.add_argument(
        "--legacy-paths",
        action="store_true",
        help="Rejoin nested header segments with '.' like older releases did",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on rows whose cell count differs from the header instead of skipping them",
    )
    parser.add_argument(
        "--delimiter",
        default=",",
        help="CSV field delimiter (default: ',')",
    )
    parser.add_argument(
        "--encoding",
        default=DEFAULT_ENCODING,
        help=f"Input encoding (default: {DEFAULT_ENCODING})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the ``csv-nest`` command and return its exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    try:
        config = ConvertConfig(
            input=args.input,
            separator=args.separator,
            out_dir=args.out_dir,
            pretty=not args.compact,
            legacy_paths=args.legacy_paths,
            strict=args.strict,
            delimiter=args.delimiter,
            encoding=args.encoding,
        )
    except ValueError as exc:
        parser.error(str(exc))

    try:
        documents = convert(config)
        text = to_json(documents, pretty=config.pretty)
        if config.out_dir is None:
            print(text)
        else:
            source = "stdin" if config.from_stdin else config.input
            write_json(config.out_dir, source, text)
    except CsvNestError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
