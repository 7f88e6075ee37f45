"""
Unit tests for configuration dataclasses.
"""

import pytest

from pagewindow import Entry, Keep, PageRequest, Paginator, PaginatorOptions, SelectorOptions
from pagewindow.window import window_options


@pytest.mark.unit
class TestPaginatorOptions:
    """Test PaginatorOptions defaults and copies."""

    def test_defaults(self) -> None:
        options = PaginatorOptions()

        assert options.default_page_size == 20
        assert list(options.filters) == []

    def test_with_filters_returns_copy(self) -> None:
        first = lambda entry: True  # noqa: E731
        second = lambda entry: False  # noqa: E731
        options = PaginatorOptions(default_page_size=5, filters=[first])

        extended = options.with_filters(second)

        assert extended is not options
        assert list(extended.filters) == [first, second]
        assert list(options.filters) == [first]
        assert extended.default_page_size == 5

    def test_default_page_size_used_by_paginator(self) -> None:
        paginator = Paginator(PaginatorOptions(default_page_size=2))
        page = paginator.page([Entry(n) for n in range(5)])

        assert page.keys == [0, 1]


@pytest.mark.unit
class TestWindowOptions:
    """Test the selector roles derived from a page request."""

    def test_roles_without_start(self) -> None:
        roles = window_options(PageRequest(page_size=3))

        assert [r.name for r in roles] == ["current", "tail"]
        current, tail = roles
        assert (current.capacity, current.keep, current.admit) == (4, Keep.SMALLEST, None)
        assert (tail.capacity, tail.keep, tail.admit) == (3, Keep.LARGEST, None)

    def test_roles_with_start(self) -> None:
        roles = {r.name: r for r in window_options(PageRequest(page_size=3, start="m"))}

        assert set(roles) == {"before", "current", "tail"}
        before, current = roles["before"], roles["current"]
        assert (before.capacity, before.keep) == (3, Keep.LARGEST)
        assert before.admit(Entry("a")) is True
        assert before.admit(Entry("m")) is False
        assert current.admit(Entry("m")) is True
        assert current.admit(Entry("a")) is False

    def test_selector_options_equality(self) -> None:
        options1 = SelectorOptions(name="tail", capacity=3, keep=Keep.LARGEST)
        options2 = SelectorOptions(name="tail", capacity=3, keep=Keep.LARGEST)
        options3 = SelectorOptions(name="tail", capacity=4, keep=Keep.LARGEST)

        assert options1 == options2
        assert options1 != options3
