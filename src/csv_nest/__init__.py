"""csv_nest: turn CSV rows into nested JSON documents."""

from .assembler import assemble_row, assemble_rows
from .config import ConvertConfig
from .errors import CsvNestError, InputError, ShapeMismatchError
from .merge import merge_values, upsert
from .paths import header_path, split_header
from .values import Value, VDict, VList, VText, to_python

__all__ = [
    "assemble_row",
    "assemble_rows",
    "ConvertConfig",
    "CsvNestError",
    "InputError",
    "ShapeMismatchError",
    "merge_values",
    "upsert",
    "header_path",
    "split_header",
    "Value",
    "VDict",
    "VList",
    "VText",
    "to_python",
]
