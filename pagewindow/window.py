"""
Window builder: three selectors that together materialize one page.

- before:  the page_size largest keys below the start key (source of `prev`)
- current: the page_size + 1 smallest keys at or above the start key
           (the page itself plus the key of the following page)
- tail:    the page_size largest keys overall (source of `last`)
"""

from enum import Enum
from typing import Any, Generic, TypeVar

from ._logging import logger, redact_key
from .config import Keep, SelectorOptions
from .exceptions import ContractViolationError
from .models import NO_PARAMS, Entry, Links
from .pagination import PageRequest, PageResult
from .selector import Selector

K = TypeVar("K")
V = TypeVar("V")


class WindowState(Enum):
    ACCUMULATING = "accumulating"
    FINALIZING = "finalizing"
    DONE = "done"


def window_options(request: PageRequest) -> list[SelectorOptions]:
    """
    Derives the selector roles for a page request.

    The `before` role only exists when the request starts from a real key.
    """
    start = request.start
    size = request.page_size
    roles = []

    if request.has_start:
        roles.append(
            SelectorOptions(
                name="before",
                capacity=size,
                keep=Keep.LARGEST,
                admit=lambda entry: entry.key < start,
            )
        )

    roles.append(
        SelectorOptions(
            name="current",
            capacity=size + 1,
            keep=Keep.SMALLEST,
            admit=(lambda entry: entry.key >= start) if request.has_start else None,
        )
    )
    roles.append(SelectorOptions(name="tail", capacity=size, keep=Keep.LARGEST))
    return roles


class WindowBuilder(Generic[K, V]):
    """
    Accumulates one pass over an entry stream and derives the page from it.

    Usage:
        window = WindowBuilder(PageRequest(page_size=20, start="bob"))
        for entry in entries:
            window.add(entry)
        page = window.build()

    A builder serves exactly one request: once build() has run, further
    add() or build() calls raise ContractViolationError.
    """

    def __init__(self, request: PageRequest) -> None:
        self.request = request
        self.page_size = request.page_size
        self.state = WindowState.ACCUMULATING
        self.total = 0

        selectors = {
            options.name: Selector.from_options(options) for options in window_options(request)
        }
        self.before: Selector[K, V] | None = selectors.get("before")
        self.current: Selector[K, V] = selectors["current"]
        self.tail: Selector[K, V] = selectors["tail"]
        self._selectors = list(selectors.values())

        logger.debug(
            "Window created",
            extra={
                "page_size": self.page_size,
                "start_hash": redact_key(request.start),
                "selectors": [s.name for s in self._selectors],
            },
        )

    def _ensure_accumulating(self) -> None:
        if self.state is not WindowState.ACCUMULATING:
            raise ContractViolationError(
                f"Window is {self.state.value}, it no longer accepts entries",
                field="state",
                value=self.state,
            )

    def add(self, entry: Entry[K, V]) -> "WindowBuilder[K, V]":
        """
        Feeds one upstream-accepted entry to every selector.

        Total is incremented once per entry, whichever selectors admit it.
        """
        self._ensure_accumulating()
        self.total += 1
        for selector in self._selectors:
            selector.admit(entry)
        return self

    def build(self) -> PageResult[K, V]:
        """
        Finalizes the pass and derives items, skipped count and links.

        Returns:
            The PageResult for the request this window was created for.
        """
        self._ensure_accumulating()
        self.state = WindowState.FINALIZING

        links = Links()

        # 1-2. One excess entry in `current` means a following page exists
        next_key: Any = None
        if len(self.current) == self.page_size + 1:
            excess = self.current.pop_extreme()
            assert excess is not None
            next_key = excess.key
        items = self.current.drain()

        # 3. `before` keeps the largest keys, so its extreme is the smallest of them
        if self.before is not None:
            prev_entry = self.before.peek_extreme()
            if prev_entry is not None:
                links.first = NO_PARAMS
                links.prev = prev_entry.key

        # 4. With capacity page_size, `tail` can pull `next` back at most once
        if next_key is not None:
            last_entry = self.tail.peek_extreme()
            assert last_entry is not None
            last_key = last_entry.key
            if last_key < next_key:
                next_key = last_key
            links.next = next_key
            links.last = last_key

        for selector in self._selectors:
            selector.drain()

        result: PageResult[K, V] = PageResult(
            items=items,
            skipped=self.current.rejected_count,
            total=self.total,
            links=links,
        )
        self.state = WindowState.DONE

        logger.info(
            "Page built",
            extra={
                "page_size": self.page_size,
                "count": result.count,
                "skipped": result.skipped,
                "total": result.total,
                "links": sorted(links.as_dict()),
            },
        )
        return result
