"""Header path splitting: turn a separator-delimited header into nested keys."""

from __future__ import annotations

from .values import Value, VDict, VText

LEGACY_JOIN = "."


def header_path(header: str, separator: str | None = None, *, legacy: bool = False) -> list[str]:
    """Split *header* into its ordered key segments.

    With *legacy* set, the remainder after each split is rejoined with ``.``
    before it is split again on *separator*, so a separator other than ``.``
    nests a single level (``a/b/c`` → ``["a", "b.c"]``).

    Always returns at least one segment. Empty segments are kept.
    """
    segments: list[str] = []
    rest = header
    while separator and separator in rest:
        head, _, rest = rest.partition(separator)
        segments.append(head)
        if legacy:
            rest = LEGACY_JOIN.join(rest.split(separator))
    segments.append(rest)
    return segments


def split_header(
    header: str,
    value: str,
    separator: str | None = None,
    *,
    legacy: bool = False,
) -> tuple[str, Value]:
    """Return ``(key, value)`` for one cell.

    Example::

        split_header("a.b.c", "1", ".")
        → ("a", VDict({"b": VDict({"c": VText("1")})}))
    """
    segments = header_path(header, separator, legacy=legacy)
    nested: Value = VText(value)
    # Wrap from the innermost segment outward.
    for key in reversed(segments[1:]):
        nested = VDict({key: nested})
    return segments[0], nested
