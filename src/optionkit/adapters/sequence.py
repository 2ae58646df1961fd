"""Positional and predicate-based element lookup returning ``Maybe``.

The search itself is ordinary iteration; these helpers only report its
outcome as ``Just(element)`` or ``Nothing``. An element that is ``None`` is
reported as absent, since ``Just(None)`` cannot exist.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from itertools import islice
from typing import TypeVar

from optionkit.core.combinators import from_optional
from optionkit.core.maybe import Maybe, nothing
from optionkit.core.settings import get_logger

from .functional import catching

T = TypeVar("T")

Predicate = Callable[[T], bool]

logger = get_logger(__name__)


def _matches(item: T, predicate: Predicate[T] | None) -> bool:
    return predicate is None or predicate(item)


def _reported(result: Maybe[T], what: str) -> Maybe[T]:
    if result.is_nothing():
        logger.debug("%s: no matching element", what)
    return result


def first(items: Iterable[T], predicate: Predicate[T] | None = None) -> Maybe[T]:
    """Return the first element (matching ``predicate``, if given).

    Stops iterating at the first match.
    """
    for item in items:
        if _matches(item, predicate):
            return _reported(from_optional(item), "first")
    return _reported(nothing(), "first")


def last(items: Iterable[T], predicate: Predicate[T] | None = None) -> Maybe[T]:
    """Return the last element (matching ``predicate``, if given)."""
    candidate: T | None = None
    for item in items:
        if _matches(item, predicate):
            candidate = item
    return _reported(from_optional(candidate), "last")


def single(items: Iterable[T], predicate: Predicate[T] | None = None) -> Maybe[T]:
    """Return the element only if exactly one element matches.

    Zero matches and more than one match both give ``Nothing``; iteration
    stops as soon as a second match is seen.
    """
    found: list[T] = []
    for item in items:
        if _matches(item, predicate):
            found.append(item)
            if len(found) > 1:
                logger.debug("single: more than one matching element")
                return nothing()
    return _reported(from_optional(found[0]) if found else nothing(), "single")


def element_at(items: Iterable[T], index: int) -> Maybe[T]:
    """Return the element at ``index``.

    Sequences accept negative indexes like ordinary subscription. Other
    iterables are consumed up to ``index``; a negative index on them gives
    ``Nothing``.
    """
    if isinstance(items, Sequence):
        result = catching(items.__getitem__, IndexError)(index)
    elif index < 0:
        result = nothing()
    else:
        result = first(islice(items, index, index + 1))
    return _reported(result, f"element_at({index})")
