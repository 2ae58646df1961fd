"""Core package: the ``Maybe`` type, its combinators, errors and settings.

Downstream code imports from the submodules directly:
    from optionkit.core.maybe import Maybe, just, nothing
    from optionkit.core.settings import load_settings, get_logger
"""

from __future__ import annotations

__all__ = ["__doc__"]
