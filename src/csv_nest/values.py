"""Value types for csv_nest documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


# ---------------------------------------------------------------------------
# Value types
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class VText:
    value: str


@dataclass(slots=True)
class VList:
    items: list[Value] = field(default_factory=list)


@dataclass(slots=True)
class VDict:
    entries: dict[str, Value] = field(default_factory=dict)


Value = Union[VText, VList, VDict]


# ---------------------------------------------------------------------------
# Conversion to plain Python
# ---------------------------------------------------------------------------

def to_python(value: Value) -> str | list | dict:
    """Convert *value* into plain ``str`` / ``list`` / ``dict`` objects.

    The result is ready for ``json.dumps``; mapping order is preserved.
    """
    if isinstance(value, VText):
        return value.value
    if isinstance(value, VList):
        return [to_python(v) for v in value.items]
    if isinstance(value, VDict):
        return {k: to_python(v) for k, v in value.entries.items()}
    raise TypeError(f"not a csv_nest value: {value!r}")
