"""
Single-pass pagination driver.

Folds one entry stream through optional filter stages into a WindowBuilder.
Runs in O(n log page_size) time and O(page_size) memory: the stream is never
materialized nor sorted, so it may be a lazy generator over a large source.
"""

from collections.abc import Iterable, Sequence
from typing import Any, TypeVar

from ._logging import logger, redact_key
from .config import PaginatorOptions, Predicate
from .filters import apply_filters
from .models import Cursor, Entry
from .pagination import PageRequest, PageResult
from .window import WindowBuilder

K = TypeVar("K")
V = TypeVar("V")


def paginate(
    entries: Iterable[Entry[K, V]],
    page_size: int,
    start: Cursor | None = None,
    filters: Sequence[Predicate] = (),
) -> PageResult[K, V]:
    """
    Computes one page of `entries` in a single pass.

    Args:
        entries: Upstream entries in any order. Keys must be unique within the
                 stream; with duplicate keys the pass still terminates in
                 bounded memory, but which duplicate lands on which page (and
                 which one a cursor refers to) is not defined.
        page_size: Positive number of items per page, validated by the caller
        start: Key to start from (inclusive), or None / NO_PARAMS for the first page
        filters: Stages an entry must pass to be counted at all

    Returns:
        PageResult with items, skipped, total and links

    Raises:
        ContractViolationError: If page_size is not a positive integer

    Usage:
        page = paginate(entries, page_size=20, start="bob")
        if page.has_more:
            following = paginate(entries_again, 20, start=page.links.next)
    """
    request = PageRequest(page_size=page_size, start=start)
    return run(request, apply_filters(entries, filters))


def run(request: PageRequest, entries: Iterable[Entry[K, V]]) -> PageResult[K, V]:
    """Folds an already filtered stream into a fresh window for `request`."""
    window: WindowBuilder[K, V] = WindowBuilder(request)
    for entry in entries:
        window.add(entry)
    return window.build()


class Paginator:
    """
    Reusable pagination entry point for one kind of collection.

    Holds the filter stages and default page size shared by every request,
    e.g. the security filter of a listing endpoint. Each call to page()
    allocates fresh window state; nothing is kept between calls.

    Usage:
        users = Paginator(PaginatorOptions(default_page_size=20, filters=[visible]))
        page = users.page(source, start=request_start)
    """

    def __init__(self, options: PaginatorOptions | None = None) -> None:
        self.options = options or PaginatorOptions()

    def page(
        self,
        entries: Iterable[Entry[Any, Any]],
        start: Cursor | None = None,
        page_size: int | None = None,
        filters: Sequence[Predicate] = (),
    ) -> PageResult[Any, Any]:
        """
        Computes one page of `entries`.

        Args:
            entries: Upstream entry stream
            start: Start cursor, None or NO_PARAMS for the first page
            page_size: Overrides options.default_page_size
            filters: Extra stages applied after the configured ones

        Returns:
            PageResult for this request
        """
        size = self.options.default_page_size if page_size is None else page_size
        request = PageRequest(page_size=size, start=start)

        logger.debug(
            "Paginating",
            extra={
                "page_size": request.page_size,
                "start_hash": redact_key(request.start),
                "filters": len(self.options.filters) + len(filters),
            },
        )

        stream = apply_filters(entries, [*self.options.filters, *filters])
        return run(request, stream)
