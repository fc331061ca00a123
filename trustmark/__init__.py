"""trustmark: trusted value types against injection into HTML sinks.

A ``SafeHtml``, ``SafeScript`` or ``TrustedResourceUrl`` can only be
created by the functions below.  Each carries a private brand that is
checked whenever the value is unwrapped, so a wrapper built any other way
is rejected with ``ForgedValueError``.

Public API:
    - html_escape             — escape plain text into SafeHtml
    - script_to_html          — inline <script> element from a SafeScript
    - script_url_to_html      — <script src> element from a TrustedResourceUrl
    - concat_htmls            — join SafeHtml values
    - concat_scripts          — join SafeScript values
    - safe_script_with_args   — call a SafeScript function with JSON arguments
    - html_safe_by_review     — brand reviewed markup (restricted)
    - script_safe_by_review   — brand reviewed script (restricted)
    - resource_url_safe_by_review — brand a reviewed resource URL (restricted)
    - unwrap_html / unwrap_script / unwrap_resource_url — brand-checked unwrap
    - is_html / is_script / is_resource_url — brand-checked type tests
    - EscapeOptions / ScriptOptions / ScriptUrlOptions — builder option records
    - TrustmarkSettings       — environment-driven settings
    - TrustmarkError          — base exception for blanket catch
    - ForgedValueError        — raised when a brand check fails
    - InvalidOptionsError     — raised on invalid options or script arguments
    - ReviewJustificationError — raised when a review lacks justification
"""

from __future__ import annotations

from trustmark.builders import (
    EscapeOptions,
    ScriptOptions,
    ScriptUrlOptions,
    concat_htmls,
    concat_scripts,
    html_escape,
    safe_script_with_args,
    script_to_html,
    script_url_to_html,
)
from trustmark.config import TrustmarkSettings, get_settings, reset_settings
from trustmark.exceptions import (
    ForgedValueError,
    InvalidOptionsError,
    ReviewJustificationError,
    TrustmarkError,
)
from trustmark.internals import (
    EMPTY_HTML,
    EMPTY_SCRIPT,
    SafeHtml,
    SafeScript,
    TrustedResourceUrl,
    is_html,
    is_resource_url,
    is_script,
    unwrap_html,
    unwrap_resource_url,
    unwrap_script,
)
from trustmark.restricted import (
    html_safe_by_review,
    resource_url_safe_by_review,
    script_safe_by_review,
)

__all__ = [
    "EMPTY_HTML",
    "EMPTY_SCRIPT",
    "EscapeOptions",
    "ForgedValueError",
    "InvalidOptionsError",
    "ReviewJustificationError",
    "SafeHtml",
    "SafeScript",
    "ScriptOptions",
    "ScriptUrlOptions",
    "TrustedResourceUrl",
    "TrustmarkError",
    "TrustmarkSettings",
    "concat_htmls",
    "concat_scripts",
    "get_settings",
    "html_escape",
    "html_safe_by_review",
    "is_html",
    "is_resource_url",
    "is_script",
    "reset_settings",
    "resource_url_safe_by_review",
    "safe_script_with_args",
    "script_safe_by_review",
    "script_to_html",
    "script_url_to_html",
    "unwrap_html",
    "unwrap_resource_url",
    "unwrap_script",
]
