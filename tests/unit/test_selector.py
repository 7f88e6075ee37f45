"""
Unit tests for the bounded top-k Selector.
"""

import random

import pytest

from pagewindow import ContractViolationError, Entry, Keep, Selector, SelectorOptions


def _entries(keys):
    return [Entry(k, f"payload-{k}") for k in keys]


@pytest.mark.unit
class TestSelectorConstruction:
    """Test capacity validation and construction from options."""

    def test_negative_capacity_fails_fast(self):
        with pytest.raises(ContractViolationError) as exc_info:
            Selector(-1)

        assert exc_info.value.field == "capacity"
        assert exc_info.value.value == -1

    @pytest.mark.parametrize("capacity", [1.5, "3", None, True])
    def test_non_integer_capacity_rejected(self, capacity):
        with pytest.raises(ContractViolationError):
            Selector(capacity)

    def test_zero_capacity_retains_nothing(self):
        selector = Selector(0)
        assert selector.admit(Entry(1)) is True
        assert len(selector) == 0
        assert selector.peek_extreme() is None
        assert selector.drain() == []

    def test_from_options(self):
        options = SelectorOptions(
            name="tail", capacity=2, keep=Keep.LARGEST, admit=lambda e: e.key != 5
        )
        selector = Selector.from_options(options)

        assert selector.name == "tail"
        assert selector.capacity == 2
        assert selector.keep is Keep.LARGEST
        selector.admit(Entry(5))
        assert selector.rejected_count == 1


@pytest.mark.unit
class TestSelectorRetention:
    """Test which entries survive for each Keep direction."""

    def test_keep_smallest(self):
        selector = Selector(3, Keep.SMALLEST)
        for entry in _entries([7, 2, 9, 4, 1, 8]):
            selector.admit(entry)

        assert selector.count == 3
        assert [e.key for e in selector.drain()] == [1, 2, 4]

    def test_keep_largest(self):
        selector = Selector(3, Keep.LARGEST)
        for entry in _entries([7, 2, 9, 4, 1, 8]):
            selector.admit(entry)

        assert [e.key for e in selector.drain()] == [7, 8, 9]

    def test_under_capacity_keeps_everything(self):
        selector = Selector(10, Keep.SMALLEST)
        for entry in _entries(["c", "a", "b"]):
            selector.admit(entry)

        assert [e.key for e in selector.drain()] == ["a", "b", "c"]

    def test_payload_travels_with_key(self):
        selector = Selector(1, Keep.SMALLEST)
        selector.admit(Entry("b", {"id": 2}))
        selector.admit(Entry("a", {"id": 1}))

        assert selector.drain() == [Entry("a", {"id": 1})]

    def test_payloads_are_never_compared(self):
        """Unorderable payloads must not break the heap."""
        selector = Selector(2, Keep.SMALLEST)
        for key in [3, 1, 2]:
            selector.admit(Entry(key, object()))

        assert [e.key for e in selector.drain()] == [1, 2]

    @pytest.mark.parametrize("seed", range(10))
    def test_matches_sorting(self, seed):
        rng = random.Random(seed)
        keys = rng.sample(range(1000), rng.randint(0, 60))
        capacity = rng.randint(0, 12)

        smallest = Selector(capacity, Keep.SMALLEST)
        largest = Selector(capacity, Keep.LARGEST)
        for entry in _entries(keys):
            smallest.admit(entry)
            largest.admit(entry)

        expected_largest = sorted(keys)[max(len(keys) - capacity, 0) :]
        assert [e.key for e in smallest.drain()] == sorted(keys)[:capacity]
        assert [e.key for e in largest.drain()] == expected_largest


@pytest.mark.unit
class TestSelectorAdmission:
    """Test the admission predicate and rejection counting."""

    def test_rejected_entries_are_counted_not_kept(self):
        selector = Selector(5, Keep.SMALLEST, admit=lambda e: e.key >= 10)
        results = [selector.admit(e) for e in _entries([3, 10, 12, 9, 11])]

        assert results == [False, True, True, False, True]
        assert selector.rejected_count == 2
        assert [e.key for e in selector.drain()] == [10, 11, 12]

    def test_evicted_entries_are_not_rejections(self):
        selector = Selector(1, Keep.SMALLEST)
        for entry in _entries([1, 2, 3]):
            selector.admit(entry)

        assert selector.rejected_count == 0
        assert len(selector) == 1


@pytest.mark.unit
class TestSelectorExtremes:
    """Test peek/pop of the eviction candidate and draining."""

    def test_peek_extreme_keep_smallest_is_largest_retained(self):
        selector = Selector(3, Keep.SMALLEST)
        for entry in _entries([5, 1, 9, 3]):
            selector.admit(entry)

        assert selector.peek_extreme().key == 5
        assert len(selector) == 3

    def test_peek_extreme_keep_largest_is_smallest_retained(self):
        selector = Selector(3, Keep.LARGEST)
        for entry in _entries([5, 1, 9, 3]):
            selector.admit(entry)

        assert selector.peek_extreme().key == 3

    def test_pop_extreme(self):
        selector = Selector(4, Keep.SMALLEST)
        for entry in _entries([4, 2, 3, 1]):
            selector.admit(entry)

        assert selector.pop_extreme().key == 4
        assert [e.key for e in selector.drain()] == [1, 2, 3]

    def test_empty_extremes(self):
        selector = Selector(3)
        assert selector.peek_extreme() is None
        assert selector.pop_extreme() is None

    def test_drain_empties(self):
        selector = Selector(3)
        selector.admit(Entry(1))
        selector.drain()

        assert len(selector) == 0
        assert selector.drain() == []

    def test_tuple_keys(self):
        selector = Selector(2, Keep.SMALLEST)
        for key in [("bob", "local"), ("alice", "local"), ("alice", "external")]:
            selector.admit(Entry(key))

        assert [e.key for e in selector.drain()] == [("alice", "external"), ("alice", "local")]


@pytest.mark.unit
class TestSelectorDuplicateKeys:
    """Equal keys are ordered by admission sequence."""

    def test_keep_smallest_keeps_first_admitted_duplicate(self):
        selector = Selector(1, Keep.SMALLEST)
        selector.admit(Entry("k", "first"))
        selector.admit(Entry("k", "second"))

        assert [e.payload for e in selector.drain()] == ["first"]

    def test_keep_largest_keeps_last_admitted_duplicate(self):
        selector = Selector(1, Keep.LARGEST)
        selector.admit(Entry("k", "first"))
        selector.admit(Entry("k", "second"))

        assert [e.payload for e in selector.drain()] == ["second"]

    def test_drain_orders_duplicates_by_admission(self):
        selector = Selector(3, Keep.SMALLEST)
        for payload in ["x", "y", "z"]:
            selector.admit(Entry("k", payload))

        assert [e.payload for e in selector.drain()] == ["x", "y", "z"]
