"""
Core value types: entries, cursors and navigation links.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar, Union

K = TypeVar("K")
V = TypeVar("V")


class _NoParams(Enum):
    """Single-member enum so the sentinel keeps its identity and type."""

    NO_PARAMS = "noparams"

    def __repr__(self) -> str:
        return "NO_PARAMS"


# Cursor of the very first page: a request without any start parameter.
NO_PARAMS = _NoParams.NO_PARAMS

# A cursor is either NO_PARAMS or a key taken from an entry.
Cursor = Union[_NoParams, Any]


@dataclass(frozen=True, slots=True)
class Entry(Generic[K, V]):
    """
    One element of the paged collection.

    Attributes:
        key: Totally ordered identity of the entry. Doubles as sort key and
             cursor value, e.g. a user name or a (name, domain) tuple.
        payload: Opaque data carried along untouched.
    """

    key: K
    payload: V | None = None


LINK_NAMES = ("first", "prev", "next", "last")


@dataclass
class Links:
    """
    Navigation cursors of a page. A link set to None is absent.

    `first` is always NO_PARAMS when present; the other links hold keys.
    """

    first: Cursor | None = None
    prev: Cursor | None = None
    next: Cursor | None = None
    last: Cursor | None = None

    def as_dict(self) -> dict[str, Cursor]:
        """Returns only the links that are present, in first/prev/next/last order."""
        return {
            name: getattr(self, name) for name in LINK_NAMES if getattr(self, name) is not None
        }

    def __contains__(self, name: str) -> bool:
        return name in LINK_NAMES and getattr(self, name) is not None

    @property
    def has_next(self) -> bool:
        return self.next is not None

    @property
    def has_prev(self) -> bool:
        return self.prev is not None


def cursor_value(cursor: Cursor) -> Any:
    """Value of a cursor for rendering: None for NO_PARAMS, the key otherwise."""
    return None if cursor is NO_PARAMS else cursor
