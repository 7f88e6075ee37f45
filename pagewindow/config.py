from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .models import Entry

# Predicate deciding whether an entry may enter a selector or pass a filter stage.
Predicate = Callable[[Entry[Any, Any]], bool]


class Keep(Enum):
    """Which end of the key order a selector retains."""

    SMALLEST = "smallest"
    LARGEST = "largest"


@dataclass
class SelectorOptions:
    """
    Configuration of one Selector role inside a window.

    The window builder derives one of these per role (before, current, tail)
    from the page request.
    """

    name: str
    capacity: int
    keep: Keep
    admit: Predicate | None = None


@dataclass
class PaginatorOptions:
    """
    Reusable configuration of a Paginator.

    Attributes:
        default_page_size: Page size used when a call does not pass one.
        filters: Filter stages applied, in order, before entries are counted.
    """

    default_page_size: int = 20
    filters: Sequence[Predicate] = field(default_factory=list)

    def with_filters(self, *filters: Predicate) -> "PaginatorOptions":
        """
        Returns a copy of these options with extra filter stages appended.

        Args:
            filters: Predicates to run after the already configured ones

        Returns:
            New PaginatorOptions, this instance is left untouched
        """
        return PaginatorOptions(
            default_page_size=self.default_page_size,
            filters=[*self.filters, *filters],
        )
