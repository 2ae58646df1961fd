"""Lift partial lookup functions into ``Maybe``-returning functions.

Three calling conventions for "may not find anything" are common in Python
code, and each gets its own adapter:

- ``wrap``: the try-pattern, ``key -> (found, value)``.
- ``wrap_nullable``: ``key -> value | None``.
- ``catching``: ``key -> value`` that raises when there is nothing to return.

The adapters never look anything up themselves; they only translate the
result shape. Failures unrelated to "not found" belong to the wrapped
function and propagate unchanged.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from optionkit.core.combinators import from_optional
from optionkit.core.maybe import Maybe, just, nothing

K = TypeVar("K")
V = TypeVar("V")

TryGet = Callable[[K], tuple[bool, V]]

DEFAULT_MISS_EXCEPTIONS: tuple[type[Exception], ...] = (LookupError, ValueError)


def wrap(try_get: TryGet[K, V]) -> Callable[[K], Maybe[V]]:
    """Adapt a try-pattern function into ``key -> Maybe[value]``.

    Parameters
    ----------
    try_get:
        Callable returning a ``(found, value)`` pair. ``value`` is ignored when
        ``found`` is false.

    Returns
    -------
    Callable[[K], Maybe[V]]
        ``just(value)`` exactly when ``try_get`` reports success, otherwise
        ``nothing()``.

    Example
    -------
    >>> table = {"a": "x"}
    >>> lookup = wrap(lambda k: (k in table, table.get(k, "")))
    >>> lookup("a"), lookup("b")
    (Just('x'), Nothing)
    """

    def lookup(key: K) -> Maybe[V]:
        found, value = try_get(key)
        return just(value) if found else nothing()

    return lookup


def wrap_nullable(fn: Callable[[K], V | None]) -> Callable[[K], Maybe[V]]:
    """Adapt a function that returns ``None`` for "not found"."""

    def lookup(key: K) -> Maybe[V]:
        return from_optional(fn(key))

    return lookup


def catching(
    fn: Callable[[K], V], *exceptions: type[Exception]
) -> Callable[[K], Maybe[V]]:
    """Adapt a function that raises for "not found".

    Only the listed ``exceptions`` (default: ``LookupError`` and ``ValueError``)
    are turned into ``nothing()``; anything else propagates. A ``None`` result
    is also treated as absent.
    """
    misses = exceptions or DEFAULT_MISS_EXCEPTIONS

    def lookup(key: K) -> Maybe[V]:
        try:
            result = fn(key)
        except misses:
            return nothing()
        return from_optional(result)

    return lookup
