"""``SafeHtml``: markup that is safe to insert into element content."""

from __future__ import annotations

from typing import ClassVar

from trustmark.internals.brand import (
    TrustedValue,
    is_trusted,
    make_trusted,
    unwrap_trusted,
)

__all__ = [
    "EMPTY_HTML",
    "SafeHtml",
    "create_html",
    "is_html",
    "unwrap_html",
]


class SafeHtml(TrustedValue):
    """Markup known to be safe for HTML sinks.

    Implements ``__html__`` so template engines that honour the protocol
    insert the payload without escaping it again.
    """

    __slots__ = ()

    category: ClassVar[str] = "html"

    def __html__(self) -> str:
        return unwrap_html(self)


def create_html(html: str) -> SafeHtml:
    """Brand *html* as ``SafeHtml``.  Internal use only."""
    return make_trusted(SafeHtml, html)


def unwrap_html(value: SafeHtml) -> str:
    """Return the markup held by *value*."""
    return unwrap_trusted(value, SafeHtml)


def is_html(value: object) -> bool:
    """Return ``True`` if *value* is a genuine ``SafeHtml``."""
    return is_trusted(value, SafeHtml)


EMPTY_HTML: SafeHtml = create_html("")
