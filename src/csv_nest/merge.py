"""Value merging for keys that receive more than one value."""

from __future__ import annotations

from .values import Value, VDict, VList


def merge_values(existing: Value, incoming: Value) -> Value:
    """Combine two values destined for the same key.

    - VDict + VDict: deep union, existing keys first, collisions merged
    - VList + VList: incoming items appended
    - VList + other (either side): the other value appended to the list
    - anything else: ``VList([existing, incoming])``

    Arguments are never mutated; argument order decides item order.
    """
    if isinstance(existing, VDict) and isinstance(incoming, VDict):
        entries = dict(existing.entries)
        for key, value in incoming.entries.items():
            upsert(entries, key, value)
        return VDict(entries)

    if isinstance(existing, VList) and isinstance(incoming, VList):
        return VList(existing.items + incoming.items)

    if isinstance(existing, VList):
        return VList(existing.items + [incoming])
    if isinstance(incoming, VList):
        return VList(incoming.items + [existing])

    return VList([existing, incoming])


def upsert(entries: dict[str, Value], key: str, value: Value) -> None:
    """Insert *value* under *key*, merging with any value already there."""
    if key in entries:
        entries[key] = merge_values(entries[key], value)
    else:
        entries[key] = value
