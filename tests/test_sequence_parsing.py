"""Unit tests for sequence search helpers and the text parsers."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from optionkit.adapters.parsing import parse_bool, parse_float, parse_int
from optionkit.adapters.sequence import element_at, first, last, single
from optionkit.core.errors import InvalidArgumentError
from optionkit.core.maybe import just, nothing


def _counting(items: list[int], seen: list[int]) -> Iterator[int]:
    for item in items:
        seen.append(item)
        yield item


def test_first_and_last() -> None:
    data = [3, 8, 5, 10]
    assert first(data) == just(3)
    assert last(data) == just(10)
    assert first(data, lambda x: x % 2 == 0) == just(8)
    assert last(data, lambda x: x < 6) == just(5)
    assert first([]) == nothing()
    assert last([], lambda x: True) == nothing()
    assert first(data, lambda x: x > 100) == nothing()


def test_first_stops_at_match() -> None:
    seen: list[int] = []
    assert first(_counting([1, 2, 3, 4], seen), lambda x: x == 2) == just(2)
    assert seen == [1, 2]


def test_single_requires_exactly_one_match() -> None:
    assert single([7]) == just(7)
    assert single([]) == nothing()
    assert single([1, 2]) == nothing()
    assert single([1, 2, 3], lambda x: x == 2) == just(2)
    assert single([2, 2], lambda x: x == 2) == nothing()


def test_single_stops_at_second_match() -> None:
    seen: list[int] = []
    assert single(_counting([1, 2, 3, 4], seen)) == nothing()
    assert seen == [1, 2]


def test_none_elements_are_absent() -> None:
    assert first([None, 1]) == nothing()
    assert last([1, None]) == nothing()
    assert element_at([None], 0) == nothing()


def test_element_at() -> None:
    data = ["a", "b", "c"]
    assert element_at(data, 0) == just("a")
    assert element_at(data, -1) == just("c")
    assert element_at(data, 3) == nothing()
    assert element_at(iter(data), 1) == just("b")
    assert element_at(iter(data), 5) == nothing()
    assert element_at(iter(data), -1) == nothing()


@pytest.mark.parametrize(
    ("text", "expected"),
    [("42", just(42)), (" -7 ", just(-7)), ("4.2", nothing()), ("", nothing())],
)
def test_parse_int(text: str, expected: object) -> None:
    assert parse_int(text) == expected


def test_parse_int_with_base() -> None:
    assert parse_int("ff", base=16) == just(255)
    assert parse_int("0b101", base=0) == just(5)
    assert parse_int("9", base=8) == nothing()


def test_parse_float() -> None:
    assert parse_float("2.5") == just(2.5)
    assert parse_float("1e3") == just(1000.0)
    assert parse_float("abc") == nothing()


def test_parse_bool() -> None:
    assert parse_bool("TRUE") == just(True)
    assert parse_bool(" off ") == just(False)
    assert parse_bool("0") == just(False)
    assert parse_bool("maybe") == nothing()


@pytest.mark.parametrize("base", [1, -2, 37])
def test_parse_int_rejects_invalid_base(base: int) -> None:
    """A bad radix is caller misuse and raises instead of becoming `Nothing`."""
    with pytest.raises(InvalidArgumentError):
        parse_int("10", base=base)
