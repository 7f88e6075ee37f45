"""
Bounded top-k selection.

A Selector keeps at most `capacity` entries from a stream: the smallest or
the largest keys seen so far, depending on its Keep direction. It is backed
by a binary heap whose root is always the next eviction candidate, so each
admission costs O(log capacity) and memory never exceeds capacity + 1 slots.
"""

import heapq
from itertools import count
from typing import Any, Generic, TypeVar

from .config import Keep, Predicate, SelectorOptions
from .exceptions import ContractViolationError
from .models import Entry

K = TypeVar("K")
V = TypeVar("V")


class _Slot:
    """
    Heap slot wrapping an entry.

    Slots order by (key, seq), reversed for selectors that keep the smallest
    keys, so the heap root is the largest key there and the smallest key
    otherwise. Payloads are never compared.
    """

    __slots__ = ("key", "seq", "entry", "reverse")

    def __init__(self, entry: Entry[Any, Any], seq: int, reverse: bool) -> None:
        self.key = entry.key
        self.seq = seq
        self.entry = entry
        self.reverse = reverse

    def __lt__(self, other: "_Slot") -> bool:
        if self.reverse:
            return (self.key, self.seq) > (other.key, other.seq)
        return (self.key, self.seq) < (other.key, other.seq)


class Selector(Generic[K, V]):
    """
    Keeps the `capacity` best entries admitted so far.

    Entries rejected by the admission predicate are only counted. Admitted
    entries are retained until a better one pushes them out; on overflow
    exactly one entry is evicted: the largest key when keeping the smallest,
    the smallest key when keeping the largest.

    Keys are expected to be unique within one pass. Equal keys are still
    handled deterministically: the entry admitted first sorts before the
    later one, so it is evicted last when keeping the smallest keys and
    first when keeping the largest.
    """

    def __init__(
        self,
        capacity: int,
        keep: Keep = Keep.SMALLEST,
        admit: Predicate | None = None,
        name: str = "selector",
    ) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 0:
            raise ContractViolationError(
                f"Selector '{name}' capacity must be a non-negative integer, got {capacity!r}",
                field="capacity",
                value=capacity,
            )

        self.name = name
        self.capacity = capacity
        self.keep = keep
        self._admit = admit
        self._reverse = keep is Keep.SMALLEST
        self._heap: list[_Slot] = []
        self._seq = count()
        self._rejected = 0

    @classmethod
    def from_options(cls, options: SelectorOptions) -> "Selector[Any, Any]":
        """Builds a Selector from a SelectorOptions role definition."""
        return cls(
            capacity=options.capacity,
            keep=options.keep,
            admit=options.admit,
            name=options.name,
        )

    def admit(self, entry: Entry[K, V]) -> bool:
        """
        Offers an entry to the selector.

        Args:
            entry: The entry to offer

        Returns:
            False if the admission predicate rejected the entry, True otherwise
            (even when the entry was evicted again straight away).
        """
        if self._admit is not None and not self._admit(entry):
            self._rejected += 1
            return False

        slot = _Slot(entry, next(self._seq), self._reverse)
        if len(self._heap) < self.capacity:
            heapq.heappush(self._heap, slot)
        else:
            # Full (or zero capacity): push and evict the root in one step
            heapq.heappushpop(self._heap, slot)
        return True

    def peek_extreme(self) -> Entry[K, V] | None:
        """
        Returns the eviction candidate without removing it.

        That is the largest retained key when keeping the smallest keys and
        the smallest retained key when keeping the largest ones.
        """
        if not self._heap:
            return None
        return self._heap[0].entry

    def pop_extreme(self) -> Entry[K, V] | None:
        """Removes and returns the eviction candidate (see peek_extreme)."""
        if not self._heap:
            return None
        return heapq.heappop(self._heap).entry

    def drain(self) -> list[Entry[K, V]]:
        """
        Empties the selector.

        Returns:
            The retained entries in ascending key order.
        """
        slots = sorted(self._heap, key=lambda s: (s.key, s.seq))
        self._heap = []
        return [s.entry for s in slots]

    @property
    def count(self) -> int:
        """Number of retained entries."""
        return len(self._heap)

    @property
    def rejected_count(self) -> int:
        """Number of entries refused by the admission predicate."""
        return self._rejected

    def __len__(self) -> int:
        return len(self._heap)

    def __repr__(self) -> str:
        return (
            f"Selector(name={self.name!r}, capacity={self.capacity}, keep={self.keep.value}, "
            f"count={len(self._heap)}, rejected={self._rejected})"
        )
