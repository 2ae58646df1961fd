"""Text parsers that report failure as ``Nothing`` instead of raising."""

from __future__ import annotations

from typing import TypeVar

from optionkit.core.errors import InvalidArgumentError
from optionkit.core.maybe import Maybe
from optionkit.core.settings import get_logger

from .functional import catching

T = TypeVar("T")

logger = get_logger(__name__)

_BOOL_WORDS: dict[str, bool] = {
    "true": True,
    "yes": True,
    "on": True,
    "1": True,
    "false": False,
    "no": False,
    "off": False,
    "0": False,
}


def _reported(result: Maybe[T], kind: str, text: str) -> Maybe[T]:
    if result.is_nothing():
        logger.debug("cannot parse %r as %s", text, kind)
    return result


def parse_int(text: str, base: int = 10) -> Maybe[int]:
    """Parse an integer literal in ``base``; surrounding whitespace is allowed.

    Raises
    ------
    InvalidArgumentError
        If ``base`` is neither 0 nor in ``2..36``.
    """
    if base != 0 and not 2 <= base <= 36:
        raise InvalidArgumentError(f"base must be 0 or between 2 and 36, got {base}")
    return _reported(catching(lambda t: int(t, base), ValueError)(text), "int", text)


def parse_float(text: str) -> Maybe[float]:
    return _reported(catching(float, ValueError)(text), "float", text)


def parse_bool(text: str) -> Maybe[bool]:
    """Parse ``true/false``, ``yes/no``, ``on/off`` or ``1/0`` (case-insensitive)."""
    word = text.strip().lower()
    return _reported(catching(_BOOL_WORDS.__getitem__, KeyError)(word), "bool", text)
