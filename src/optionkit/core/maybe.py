"""Typed optional value: an explicit present-or-absent container.

Motivation
----------
``None`` conflates "no value" with "a value that happens to be missing", and
every consumer has to remember to check for it. ``Maybe[T]`` makes absence a
value of its own:

- ``Just(payload)`` / ``Nothing`` variants, built with :func:`just` and
  :func:`nothing`,
- combinators: ``map``, ``flat_map`` (alias ``bind``), ``filter``, ``flatten``,
  ``zip_with``,
- fallbacks: ``or_else``, ``or_else_get``, ``or_``,
- an explicitly unsafe accessor: ``unwrap`` / ``expect``.

Invariants
----------
- A present value never wraps ``None``; :func:`just` raises
  :class:`~optionkit.core.errors.InvalidArgumentError` instead. The check is
  a normal ``raise`` and is never compiled out.
- ``Nothing`` is a process-wide singleton. It has no payload, so two absent
  values always compare and hash equal.
- Values are immutable and therefore safe to share between threads.

Example
-------
>>> from optionkit.core.maybe import just, nothing
>>> just(20).map(lambda x: x + 22).or_else(0)
42
>>> str(nothing())
'<Nothing>'
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar, cast

from .errors import InvalidArgumentError, InvalidStateError

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")

NOTHING_LITERAL = "<Nothing>"


class Maybe(Generic[T]):
    """Sum type representing either a present value (`Just[T]`) or `Nothing`."""

    __slots__ = ()

    # ----- Introspection -----------------------------------------------------
    def has_value(self) -> bool:
        """Return ``True`` if this is a :class:`Just` value."""
        return isinstance(self, Just)

    def is_nothing(self) -> bool:
        """Return ``True`` if this is the absent value."""
        return not self.has_value()

    def __bool__(self) -> bool:
        # Presence, not the truthiness of the payload: ``bool(just(0))`` is True.
        return self.has_value()

    # ----- Unsafe access -----------------------------------------------------
    def unwrap(self) -> T:
        """Return the payload, or raise :class:`InvalidStateError` if absent.

        This is the escape hatch out of the safe API. Call it only where
        presence has already been checked, or where absence is a bug.
        """
        if isinstance(self, Just):
            return cast(Just[T], self).payload
        raise InvalidStateError("value is not present")

    def expect(self, msg: str) -> T:
        """Return the payload, else raise ``InvalidStateError(msg)``."""
        if isinstance(self, Just):
            return cast(Just[T], self).payload
        raise InvalidStateError(msg)

    # ----- Combinators -------------------------------------------------------
    def map(self, fn: Callable[[T], U]) -> Maybe[U]:
        """Apply ``fn`` to the payload; ``Nothing`` passes through untouched.

        ``fn`` must not return ``None``: the result is wrapped with
        :func:`just`, which rejects it. Use :meth:`flat_map` together with
        :func:`~optionkit.core.combinators.from_optional` for functions that
        may yield ``None``.
        """
        if isinstance(self, Just):
            return just(fn(cast(Just[T], self).payload))
        return nothing()

    def flat_map(self, fn: Callable[[T], Maybe[U]]) -> Maybe[U]:
        """Chain computations that already return a :class:`Maybe`."""
        if isinstance(self, Just):
            return fn(cast(Just[T], self).payload)
        return nothing()

    def bind(self, fn: Callable[[T], Maybe[U]]) -> Maybe[U]:
        """Alias of :meth:`flat_map`."""
        return self.flat_map(fn)

    def filter(self, predicate: Callable[[T], bool]) -> Maybe[T]:
        """Keep the value only if ``predicate`` holds; never calls it on ``Nothing``."""
        if isinstance(self, Just) and predicate(cast(Just[T], self).payload):
            return self
        return nothing()

    def flatten(self: Maybe[Maybe[U]]) -> Maybe[U]:
        """Collapse one level of nesting.

        ``Nothing`` and ``Just(Nothing)`` both become ``Nothing``;
        ``Just(Just(v))`` becomes ``Just(v)``.

        Raises
        ------
        TypeError
            If the payload of a present value is not itself a ``Maybe``.
        """
        if isinstance(self, Just):
            inner = cast(Just[Maybe[U]], self).payload
            if not isinstance(inner, Maybe):
                raise TypeError(f"flatten expects a nested Maybe, got {type(inner).__name__}")
            return inner
        return nothing()

    def zip_with(self, other: Maybe[U], fn: Callable[[T, U], V]) -> Maybe[V]:
        """Combine two present values with ``fn``; absent if either is absent.

        The two-generator comprehension written out with the primitives:
        ``self.flat_map(lambda a: other.map(lambda b: fn(a, b)))``.
        """
        return self.flat_map(lambda a: other.map(lambda b: fn(a, b)))

    # ----- Fallbacks ---------------------------------------------------------
    def or_else(self, default: T) -> T:
        """Return the payload, or ``default`` if absent."""
        if isinstance(self, Just):
            return cast(Just[T], self).payload
        return default

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        """Return the payload, or call ``supplier()`` only when absent."""
        if isinstance(self, Just):
            return cast(Just[T], self).payload
        return supplier()

    def or_(self, other: Maybe[T]) -> Maybe[T]:
        """Return ``self`` if present, otherwise ``other``."""
        return self if self.has_value() else other

    def to_optional(self) -> T | None:
        """Return the payload or ``None``."""
        return self.or_else(cast(T, None))

    # ----- Dunder helpers ----------------------------------------------------
    def __iter__(self) -> Iterator[T]:
        # Lets comprehensions consume options: ``[x for x in just(1)] == [1]``.
        if isinstance(self, Just):
            yield cast(Just[T], self).payload

    def __str__(self) -> str:
        if isinstance(self, Just):
            return str(cast(Just[T], self).payload)
        return NOTHING_LITERAL

    def __repr__(self) -> str:
        if isinstance(self, Just):
            return f"Just({cast(Just[T], self).payload!r})"
        return "Nothing"


@dataclass(frozen=True, slots=True, repr=False)
class Just(Maybe[T]):
    """Present value wrapping a non-``None`` payload of type ``T``.

    Equality and hashing come from the dataclass and delegate to the payload,
    so ``Just(1) == Just(1)`` and ``hash(Just(1)) == hash(Just(1))``.
    """

    payload: T

    def __post_init__(self) -> None:
        if self.payload is None:
            raise InvalidArgumentError(
                "cannot wrap None as a present value; use nothing() or from_optional()"
            )


class _Nothing(Maybe[Any]):
    """The absent value. Only one instance ever exists."""

    __slots__ = ()

    _instance: ClassVar[_Nothing | None] = None

    def __new__(cls) -> _Nothing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _Nothing)

    def __hash__(self) -> int:
        return hash(NOTHING_LITERAL)

    def __reduce__(self) -> tuple[type[_Nothing], tuple[()]]:
        # Unpickling and copying go through __new__ and land on the singleton.
        return (_Nothing, ())


Nothing: Maybe[Any] = _Nothing()


# ----- Convenience constructors ----------------------------------------------
def just(value: T) -> Maybe[T]:
    """Construct :class:`Just` with better type inference at call sites.

    Raises
    ------
    InvalidArgumentError
        If ``value`` is ``None``.
    """
    return Just(value)


def nothing() -> Maybe[T]:
    """Return the shared ``Nothing`` instance typed as ``Maybe[T]``."""
    return cast(Maybe[T], Nothing)


def flatten(nested: Maybe[Maybe[T]]) -> Maybe[T]:
    """Function form of :meth:`Maybe.flatten`."""
    return nested.flatten()
