"""Adapters that turn lookups, searches and parses into ``Maybe`` results."""

from __future__ import annotations

from .functional import catching, wrap, wrap_nullable
from .mapping import lookup, lookup_path
from .parsing import parse_bool, parse_float, parse_int
from .sequence import element_at, first, last, single

__all__ = [
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
