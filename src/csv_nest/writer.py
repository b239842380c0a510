"""Serialization sink: render documents as JSON."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable

from .errors import CsvNestError
from .values import VDict, to_python

logger = logging.getLogger(__name__)


def to_json(documents: Iterable[VDict], *, pretty: bool = True) -> str:
    """Render *documents* as a JSON array."""
    data = [to_python(doc) for doc in documents]
    if pretty:
        return json.dumps(data, indent=2, ensure_ascii=False)
    return json.dumps(data, ensure_ascii=False)


def output_path(out_dir: str | Path, source: str | Path) -> Path:
    """``<out_dir>/<stem of source>.json``"""
    stem = Path(source).stem
    if not stem:
        raise CsvNestError(f"Could not derive a file name from '{source}'")
    return Path(out_dir) / f"{stem}.json"


def write_json(out_dir: str | Path, source: str | Path, text: str) -> Path:
    """Write *text* to ``output_path(out_dir, source)`` and return that path."""
    path = output_path(out_dir, source)
    logger.info("Writing to %s", path)
    try:
        path.write_text(text + "\n", encoding="utf-8")
    except OSError as exc:
        raise CsvNestError(f"Could not write '{path}': {exc}") from exc
    return path
