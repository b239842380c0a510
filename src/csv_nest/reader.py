"""Tabular source: read a header row and data rows from CSV text.

Rows are produced lazily; the underlying stream must stay open while
``Table.rows`` is consumed, which ``open_table`` / ``open_binary_table``
take care of.
"""

from __future__ import annotations

import csv
import io
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import IO, BinaryIO, Iterator

from .errors import InputError

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8-sig"


@dataclass
class Table:
    """Header names plus an iterator over the string rows beneath them."""

    headers: list[str]
    rows: Iterator[list[str]]


def _read_error(exc: Exception, reader, source: str) -> InputError:
    if isinstance(exc, UnicodeDecodeError):
        return InputError(f"Could not decode {source}: {exc}", wrapped=exc)
    return InputError(f"{source}, line {reader.line_num}: {exc}", wrapped=exc)


def _iter_rows(reader, source: str) -> Iterator[list[str]]:
    try:
        for row in reader:
            # blank line
            if not row:
                continue
            yield row
    except (csv.Error, UnicodeDecodeError) as exc:
        raise _read_error(exc, reader, source) from exc


def read_stream(stream: IO[str], *, delimiter: str = ",", source: str = "<stream>") -> Table:
    """Read the header row of a CSV *stream* and return a Table.

    Blank lines are skipped. Raises InputError for an input without a
    header row, a malformed CSV line or undecodable bytes.
    """
    reader = csv.reader(stream, delimiter=delimiter)
    headers = next(_iter_rows(reader, source), None)
    if headers is None:
        raise InputError(f"{source}: no header row")

    logger.debug("Read %d columns from %s", len(headers), source)
    return Table(headers=headers, rows=_iter_rows(reader, source))


@contextmanager
def open_table(
    path: str | Path,
    *,
    delimiter: str = ",",
    encoding: str = DEFAULT_ENCODING,
) -> Iterator[Table]:
    """Open the CSV file at *path* and yield its Table."""
    try:
        fh = open(path, encoding=encoding, newline="")
    except OSError as exc:
        raise InputError(f"Could not read '{path}': {exc}", wrapped=exc) from exc
    with fh:
        yield read_stream(fh, delimiter=delimiter, source=f"'{path}'")


@contextmanager
def open_binary_table(
    buffer: BinaryIO,
    *,
    delimiter: str = ",",
    encoding: str = DEFAULT_ENCODING,
    source: str = "<stdin>",
) -> Iterator[Table]:
    """Decode a binary stream such as ``sys.stdin.buffer`` and yield its Table.

    *buffer* is left open.
    """
    stream = io.TextIOWrapper(buffer, encoding=encoding, newline="")
    try:
        yield read_stream(stream, delimiter=delimiter, source=source)
    finally:
        stream.detach()
