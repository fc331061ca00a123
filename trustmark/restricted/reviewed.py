"""Reviewed conversions: brand a plain string after a security review.

These are the escape hatch for values that no builder can produce, such as
markup assembled by a trusted template engine or a script URL on a fixed
CDN.  Every call site must carry a written justification that a reviewer
can audit.  Calls are logged at DEBUG with the category and the
justification, never with the payload.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from trustmark.config import get_settings
from trustmark.exceptions import ReviewJustificationError
from trustmark.internals.html_impl import SafeHtml, create_html
from trustmark.internals.resource_url_impl import TrustedResourceUrl, create_resource_url
from trustmark.internals.script_impl import SafeScript, create_script

if TYPE_CHECKING:
    from trustmark.config import TrustmarkSettings

log = logging.getLogger(__name__)

__all__ = [
    "html_safe_by_review",
    "resource_url_safe_by_review",
    "script_safe_by_review",
]


def _check_review(
    category: str,
    justification: str,
    settings: TrustmarkSettings | None,
) -> None:
    if settings is None:
        settings = get_settings()
    if settings.require_justification and (
        not isinstance(justification, str) or not justification.strip()
    ):
        msg = f"a {category} conversion by review requires a justification"
        raise ReviewJustificationError(msg)
    log.debug("Reviewed %s conversion: %s", category, justification)


def html_safe_by_review(
    html: str,
    justification: str,
    *,
    settings: TrustmarkSettings | None = None,
) -> SafeHtml:
    """Brand *html* as ``SafeHtml`` on the strength of a security review.

    Raises
    ------
    ReviewJustificationError
        If *justification* is blank and justifications are required.
    """
    _check_review(SafeHtml.category, justification, settings)
    return create_html(html)


def script_safe_by_review(
    script: str,
    justification: str,
    *,
    settings: TrustmarkSettings | None = None,
) -> SafeScript:
    """Brand *script* as ``SafeScript`` on the strength of a security review.

    Raises
    ------
    ReviewJustificationError
        If *justification* is blank and justifications are required.
    """
    _check_review(SafeScript.category, justification, settings)
    return create_script(script)


def resource_url_safe_by_review(
    url: str,
    justification: str,
    *,
    settings: TrustmarkSettings | None = None,
) -> TrustedResourceUrl:
    """Brand *url* as ``TrustedResourceUrl`` on the strength of a security review.

    Raises
    ------
    ReviewJustificationError
        If *justification* is blank and justifications are required.
    """
    _check_review(TrustedResourceUrl.category, justification, settings)
    return create_resource_url(url)
