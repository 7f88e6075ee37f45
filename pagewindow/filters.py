"""
Filter stages applied to an entry stream before it reaches a window.

Only entries that pass every stage are counted in a page's total, so
security and domain filtering must happen here (or upstream of here),
never after the window has been built.
"""

from collections.abc import Iterable, Iterator
from typing import Any

from .config import Predicate
from .models import Entry


def accept_all(entry: Entry[Any, Any]) -> bool:
    """Stage that lets every entry through."""
    return True


def all_of(*predicates: Predicate) -> Predicate:
    """
    Combines predicates with AND, evaluated left to right.

    Usage:
        visible = all_of(payload_overlaps("roles", {"admin"}), not_locked)
    """
    if not predicates:
        return accept_all

    def _all(entry: Entry[Any, Any]) -> bool:
        return all(predicate(entry) for predicate in predicates)

    return _all


def payload_overlaps(field: str, values: Iterable[Any]) -> Predicate:
    """
    Keeps entries whose payload field shares at least one value with `values`.

    The payload may be a mapping or an object with the attribute; the field
    itself may hold a single value or a collection. Entries without the
    field are dropped.

    Usage:
        # users holding any of the roles that grant a permission
        stage = payload_overlaps("roles", ["admin", "cluster_admin"])
    """
    wanted = set(values)

    def _overlaps(entry: Entry[Any, Any]) -> bool:
        payload = entry.payload
        if isinstance(payload, dict):
            found = payload.get(field)
        else:
            found = getattr(payload, field, None)

        if found is None:
            return False
        if isinstance(found, (str, bytes)) or not isinstance(found, Iterable):
            return found in wanted
        return not wanted.isdisjoint(found)

    return _overlaps


def apply_filters(
    entries: Iterable[Entry[Any, Any]], filters: Iterable[Predicate]
) -> Iterator[Entry[Any, Any]]:
    """
    Lazily yields the entries accepted by every filter stage.

    Args:
        entries: Upstream entry stream, in any order
        filters: Predicates applied in order; the first rejection wins

    Returns:
        Iterator over the surviving entries, in upstream order
    """
    stages = list(filters)
    if not stages:
        yield from entries
        return

    for entry in entries:
        if all(stage(entry) for stage in stages):
            yield entry
