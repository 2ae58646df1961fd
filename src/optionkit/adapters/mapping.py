"""Key and path lookup in mappings, returning ``Maybe``.

``lookup`` is the try-pattern adapter applied to a mapping. ``lookup_path``
walks nested JSON-like data (mappings and sequences) by chaining single
lookups with ``flat_map``, so the first missing segment short-circuits the
rest of the walk.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Mapping, Sequence
from typing import Any, TypeVar

from optionkit.core.combinators import from_optional
from optionkit.core.errors import InvalidArgumentError
from optionkit.core.maybe import Maybe, just, nothing
from optionkit.core.settings import get_logger

from .functional import wrap
from .parsing import parse_int
from .sequence import element_at

K = TypeVar("K")
V = TypeVar("V")

logger = get_logger(__name__)


def _try_get_from(mapping: Mapping[K, V]) -> Callable[[K], tuple[bool, V | None]]:
    # Membership first so defaultdict-style mappings are not mutated.
    # A key mapped to None counts as missing.
    def try_get(key: K) -> tuple[bool, V | None]:
        if key in mapping:
            value = mapping[key]
            return value is not None, value
        return False, None

    return try_get


def lookup(mapping: Mapping[K, V], key: K) -> Maybe[V]:
    """Look ``key`` up in ``mapping`` without raising ``KeyError``.

    Raises
    ------
    InvalidArgumentError
        If ``mapping`` is ``None``.
    """
    if mapping is None:
        raise InvalidArgumentError("mapping must not be None")
    getter = wrap(_try_get_from(mapping))
    result = getter(key)
    if result.is_nothing():
        logger.debug("key %r not found", key)
    return result  # type: ignore[return-value]


def _split(path: str | Sequence[Hashable], sep: str) -> list[Hashable]:
    if isinstance(path, str):
        return [segment for segment in path.split(sep) if segment]
    return list(path)


def _step(node: Any, segment: Hashable) -> Maybe[Any]:
    if isinstance(node, Mapping):
        return lookup(node, segment)
    if isinstance(node, Sequence) and not isinstance(node, str | bytes):
        index = just(segment) if isinstance(segment, int) else parse_int(str(segment))
        return index.flat_map(lambda i: element_at(node, i))
    return nothing()


def lookup_path(data: Any, path: str | Sequence[Hashable], sep: str = ".") -> Maybe[Any]:
    """Follow ``path`` through nested mappings and sequences.

    Parameters
    ----------
    data:
        Root object, typically decoded JSON.
    path:
        Either a ``sep``-separated string (``"users.0.name"``) or a sequence of
        segments (``["users", 0, "name"]``). Segments that index a sequence
        must be integers or integer strings. An empty path selects ``data``.
    sep:
        Separator for string paths.

    Returns
    -------
    Maybe[Any]
        The value at the end of the path, or ``Nothing`` as soon as a segment
        is missing, out of range, or applied to a scalar.
    """
    segments = _split(path, sep)
    result: Maybe[Any] = from_optional(data)
    for segment in segments:
        result = result.flat_map(lambda node, seg=segment: _step(node, seg))
    if result.is_nothing():
        logger.debug("path %r not found", path)
    return result
