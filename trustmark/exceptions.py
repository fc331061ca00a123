"""Exception hierarchy for trustmark.

Escaping and tag assembly never fail over well-typed input.  The errors
below cover the remaining cases: a value that did not come from a
sanctioned factory, option input that does not fit the fixed option
records, and reviewed conversions missing their justification.
"""

from __future__ import annotations

__all__ = [
    "ForgedValueError",
    "InvalidOptionsError",
    "ReviewJustificationError",
    "TrustmarkError",
]


class TrustmarkError(Exception):
    """Base exception for blanket catch."""


class ForgedValueError(TrustmarkError, TypeError):
    """Raised when a value fails the brand check.

    Covers wrappers built around the sanctioned constructors, values of the
    wrong trust category, and plain strings passed where a trusted value is
    required.
    """


class InvalidOptionsError(TrustmarkError, ValueError):
    """Raised when builder options or script arguments fail validation."""


class ReviewJustificationError(TrustmarkError, ValueError):
    """Raised when a reviewed conversion is missing its justification."""
