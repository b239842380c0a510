"""Exception hierarchy for csv_nest."""

from __future__ import annotations


class CsvNestError(Exception):
    """Base exception for csv_nest."""


class ShapeMismatchError(CsvNestError):
    """Raised when a row's cell count differs from the header count."""

    def __init__(self, expected: int, actual: int, row_number: int | None = None) -> None:
        self.expected = expected
        self.actual = actual
        self.row_number = row_number
        where = f"row {row_number}" if row_number is not None else "row"
        super().__init__(f"{where} has {actual} cells, expected {expected}")


class InputError(CsvNestError):
    """Raised when the tabular input cannot be read."""

    def __init__(self, message: str, wrapped: Exception | None = None) -> None:
        super().__init__(message)
        self.wrapped = wrapped
