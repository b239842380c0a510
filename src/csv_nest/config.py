"""Conversion settings shared by the CLI and programmatic callers."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .reader import DEFAULT_ENCODING

STDIN = "-"


@dataclass
class ConvertConfig:
    """Settings for one CSV → JSON conversion.

    ``input`` is a file path, or ``"-"`` for standard input.
    ``separator`` splits headers into nested keys; ``None`` keeps them flat.
    """

    input: str
    separator: str | None = None
    out_dir: Path | None = None
    pretty: bool = True
    legacy_paths: bool = False
    strict: bool = False
    delimiter: str = ","
    encoding: str = DEFAULT_ENCODING

    def __post_init__(self) -> None:
        if not self.separator:
            self.separator = None
        if self.out_dir is not None:
            self.out_dir = Path(self.out_dir)
        if len(self.delimiter) != 1:
            raise ValueError(f"delimiter must be a single character, got {self.delimiter!r}")

    @property
    def from_stdin(self) -> bool:
        return self.input == STDIN
