"""``TrustedResourceUrl``: a URL that is safe to load code from.

Scheme and origin validation belong to whoever creates these values; this
module only carries the brand.
"""

from __future__ import annotations

from typing import ClassVar

from trustmark.internals.brand import (
    TrustedValue,
    is_trusted,
    make_trusted,
    unwrap_trusted,
)

__all__ = [
    "TrustedResourceUrl",
    "create_resource_url",
    "is_resource_url",
    "unwrap_resource_url",
]


class TrustedResourceUrl(TrustedValue):
    """URL known to be safe for script ``src`` and similar sinks."""

    __slots__ = ()

    category: ClassVar[str] = "resource url"


def create_resource_url(url: str) -> TrustedResourceUrl:
    """Brand *url* as ``TrustedResourceUrl``.  Internal use only."""
    return make_trusted(TrustedResourceUrl, url)


def unwrap_resource_url(value: TrustedResourceUrl) -> str:
    """Return the URL held by *value*."""
    return unwrap_trusted(value, TrustedResourceUrl)


def is_resource_url(value: object) -> bool:
    """Return ``True`` if *value* is a genuine ``TrustedResourceUrl``."""
    return is_trusted(value, TrustedResourceUrl)
