"""Row assembly: one row of cells → one nested document."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Sequence

from .errors import ShapeMismatchError
from .merge import upsert
from .paths import split_header
from .values import Value, VDict

logger = logging.getLogger(__name__)


def assemble_row(
    headers: Sequence[str],
    row: Sequence[str],
    separator: str | None = None,
    *,
    legacy: bool = False,
) -> VDict:
    """Build the document for a single row.

    Cells are processed in column order. A key seen again is merged with
    its earlier value instead of replacing it.

    Raises ShapeMismatchError if *row* and *headers* differ in length.
    """
    if len(headers) != len(row):
        raise ShapeMismatchError(len(headers), len(row))

    entries: dict[str, Value] = {}
    for header, cell in zip(headers, row):
        key, value = split_header(header, cell, separator, legacy=legacy)
        upsert(entries, key, value)
    return VDict(entries)


def assemble_rows(
    headers: Sequence[str],
    rows: Iterable[Sequence[str]],
    separator: str | None = None,
    *,
    legacy: bool = False,
    skip_malformed: bool = True,
) -> Iterator[VDict]:
    """Yield one document per row.

    Rows whose length does not match *headers* are skipped with a warning,
    or raised as ShapeMismatchError with their 1-based row number when
    *skip_malformed* is False.
    """
    row_number = skipped = 0
    for row_number, row in enumerate(rows, 1):
        if len(row) != len(headers):
            if not skip_malformed:
                raise ShapeMismatchError(len(headers), len(row), row_number)
            logger.warning("Skipping row %d: %d cells, expected %d",
                           row_number, len(row), len(headers))
            skipped += 1
            continue
        yield assemble_row(headers, row, separator, legacy=legacy)
    logger.info("Converted %d of %d rows", row_number - skipped, row_number)
