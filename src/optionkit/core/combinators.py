"""Free-function combinators over :class:`~optionkit.core.maybe.Maybe`.

The methods on ``Maybe`` are the primary API; these functions mirror them for
pipelines written in prefix style (``map_maybe(opt, f)``) and add helpers
that work on whole collections of options.

Multi-source comprehensions desugar onto ``flat_map`` + ``map``::

    lift2(xs, ys, f) == xs.flat_map(lambda a: ys.map(lambda b: f(a, b)))
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

from .maybe import Maybe, flatten, just, nothing

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")

__all__ = [
    "bind",
    "cat_maybes",
    "filter_maybe",
    "first_just",
    "flatten",
    "from_optional",
    "lift2",
    "map_maybe",
    "or_else",
    "or_else_get",
    "sequence",
]


# ----- Prefix forms of the methods -------------------------------------------
def map_maybe(opt: Maybe[T], fn: Callable[[T], U]) -> Maybe[U]:
    return opt.map(fn)


def bind(opt: Maybe[T], fn: Callable[[T], Maybe[U]]) -> Maybe[U]:
    return opt.flat_map(fn)


def filter_maybe(opt: Maybe[T], predicate: Callable[[T], bool]) -> Maybe[T]:
    return opt.filter(predicate)


def or_else(opt: Maybe[T], default: T) -> T:
    return opt.or_else(default)


def or_else_get(opt: Maybe[T], supplier: Callable[[], T]) -> T:
    return opt.or_else_get(supplier)


def lift2(a: Maybe[T], b: Maybe[U], fn: Callable[[T, U], V]) -> Maybe[V]:
    """Apply a two-argument function to two options (``Nothing`` if either is absent)."""
    return a.flat_map(lambda x: b.map(lambda y: fn(x, y)))


# ----- Bridging ``None`` -----------------------------------------------------
def from_optional(value: T | None) -> Maybe[T]:
    """Promote an optional value: ``None`` becomes ``Nothing``, anything else ``Just``."""
    if value is None:
        return nothing()
    return just(value)


# ----- Collections of options ------------------------------------------------
def cat_maybes(options: Iterable[Maybe[T]]) -> list[T]:
    """Return the payloads of the present options, in order."""
    return [value for opt in options for value in opt]


def sequence(options: Iterable[Maybe[T]]) -> Maybe[list[T]]:
    """Return ``Just`` of every payload if all options are present, else ``Nothing``.

    Stops at the first absent option, so a lazy iterable is not consumed past it.
    An empty input yields ``Just([])``.
    """
    values: list[T] = []
    for opt in options:
        if not opt.has_value():
            return nothing()
        values.append(opt.unwrap())
    return just(values)


def first_just(options: Iterable[Maybe[T]]) -> Maybe[T]:
    """Return the first present option, or ``Nothing`` if there is none."""
    for opt in options:
        if opt.has_value():
            return opt
    return nothing()
