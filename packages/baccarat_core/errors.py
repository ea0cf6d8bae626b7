# packages/baccarat_core/errors.py
from __future__ import annotations


class NavigatorError(ValueError):
    """Base class for engine contract violations."""


class InvalidInput(NavigatorError):
    """Raised when a score pair cannot be submitted (e.g. tie scores)."""


class LedgerError(NavigatorError):
    """Raised on out-of-order appends or unknown sequence numbers."""


__all__ = ["InvalidInput", "LedgerError", "NavigatorError"]
