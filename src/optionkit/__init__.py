"""optionkit: explicit optional values for Python.

Re-exports the public surface so downstream code can do::

    from optionkit import Maybe, just, nothing, lookup
"""

from __future__ import annotations

from .adapters.functional import catching, wrap, wrap_nullable
from .adapters.mapping import lookup, lookup_path
from .adapters.parsing import parse_bool, parse_float, parse_int
from .adapters.sequence import element_at, first, last, single
from .core.combinators import (
    bind,
    cat_maybes,
    filter_maybe,
    first_just,
    flatten,
    from_optional,
    lift2,
    map_maybe,
    or_else,
    or_else_get,
    sequence,
)
from .core.errors import InvalidArgumentError, InvalidStateError, OptionError
from .core.maybe import NOTHING_LITERAL, Just, Maybe, Nothing, just, nothing

__all__ = [
    "__version__",
    "Maybe",
    "Just",
    "Nothing",
    "NOTHING_LITERAL",
    "just",
    "nothing",
    "flatten",
    "map_maybe",
    "bind",
    "filter_maybe",
    "or_else",
    "or_else_get",
    "lift2",
    "from_optional",
    "cat_maybes",
    "sequence",
    "first_just",
    "OptionError",
    "InvalidArgumentError",
    "InvalidStateError",
    "wrap",
    "wrap_nullable",
    "catching",
    "lookup",
    "lookup_path",
    "first",
    "last",
    "single",
    "element_at",
    "parse_int",
    "parse_float",
    "parse_bool",
]
__version__ = "0.1.0"
