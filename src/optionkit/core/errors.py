"""Error taxonomy for optional values.

Two conditions exist, both signalling a caller precondition violation:

- :class:`InvalidArgumentError`: a present value was requested for ``None``.
- :class:`InvalidStateError`: the payload of an absent value was accessed.

They subclass the matching builtins (``ValueError`` / ``RuntimeError``) so
callers that already handle those keep working.
"""

from __future__ import annotations

__all__ = ["OptionError", "InvalidArgumentError", "InvalidStateError"]


class OptionError(Exception):
    """Base class for every error raised by ``optionkit``."""


class InvalidArgumentError(OptionError, ValueError):
    """Raised when a present value is constructed from ``None``."""


class InvalidStateError(OptionError, RuntimeError):
    """Raised when the payload of ``Nothing`` is accessed."""
