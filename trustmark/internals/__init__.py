"""Brand layer: the three trusted value categories.

The ``create_*`` functions are the only way to brand a string and are
meant for ``trustmark.builders`` and ``trustmark.restricted`` alone.  They
are not re-exported from the top-level package.
"""

from __future__ import annotations

from trustmark.internals.html_impl import (
    EMPTY_HTML,
    SafeHtml,
    create_html,
    is_html,
    unwrap_html,
)
from trustmark.internals.resource_url_impl import (
    TrustedResourceUrl,
    create_resource_url,
    is_resource_url,
    unwrap_resource_url,
)
from trustmark.internals.script_impl import (
    EMPTY_SCRIPT,
    SafeScript,
    create_script,
    is_script,
    unwrap_script,
)

__all__ = [
    "EMPTY_HTML",
    "EMPTY_SCRIPT",
    "SafeHtml",
    "SafeScript",
    "TrustedResourceUrl",
    "create_html",
    "create_resource_url",
    "create_script",
    "is_html",
    "is_resource_url",
    "is_script",
    "unwrap_html",
    "unwrap_resource_url",
    "unwrap_script",
]
