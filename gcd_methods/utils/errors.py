"""
Exception types raised by the GCD library.

Recoverable domain errors derive from GCDError. PreconditionViolation is kept
outside that hierarchy: it signals a caller bug, so handlers written for
domain errors must not catch it.
"""
from typing import Dict, Optional

from ..constants import MISMATCH_MESSAGE, UNDEFINED_GCD_MESSAGE


class GCDError(Exception):
    """Base class for recoverable GCD library errors."""


class UndefinedError(GCDError, ValueError):
    """GCD requested for inputs where it is mathematically undefined."""

    def __init__(self, message: str = UNDEFINED_GCD_MESSAGE):
        super().__init__(message)


class MismatchError(GCDError):
    """
    Raised when the algorithms disagree during a cross-check.

    Attributes:
        results: Mapping of algorithm name to the value it produced
    """

    def __init__(self, results: Optional[Dict[str, int]] = None,
                 message: str = MISMATCH_MESSAGE):
        super().__init__(message)
        self.results = dict(results or {})


class OutOfRangeError(GCDError, OverflowError):
    """Input falls outside the signed 64-bit domain."""


class PreconditionViolation(AssertionError):
    """A documented function contract was broken by the caller."""
