"""Builders that produce ``SafeHtml``.

Every function here either escapes plain text into markup, or assembles
markup from values that are already trusted plus structural parameters
that get escaped on the way in.  Nothing here ever brands a caller string
as-is.

Escaping
========

The five structural characters are replaced first and unconditionally::

    &  ->  &amp;      <  ->  &lt;      >  ->  &gt;
    "  ->  &quot;     '  ->  &apos;

``&`` goes first so the entities produced for the other four are not
escaped a second time.  The optional whitespace transforms then run on
the escaped text in a fixed order (spaces, newlines, tabs).  Spaces come
first because the pattern is anchored on raw ``\\r``, ``\\n`` and ``\\t``
boundaries that the later transforms replace.

Script tags
===========

Script elements are always closed with a real ``</script>`` end tag, so markup
concatenated after them is parsed as markup and never as script text.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from trustmark.builders.options import (
    EscapeOptions,
    ScriptOptions,
    ScriptUrlOptions,
    coerce_options,
)
from trustmark.internals.html_impl import SafeHtml, create_html, unwrap_html
from trustmark.internals.resource_url_impl import unwrap_resource_url
from trustmark.internals.script_impl import unwrap_script

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from trustmark.internals.resource_url_impl import TrustedResourceUrl
    from trustmark.internals.script_impl import SafeScript

__all__ = [
    "concat_htmls",
    "html_escape",
    "script_to_html",
    "script_url_to_html",
]


# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

# Start of string or a whitespace character, followed by a space.
_SPACE_PATTERN: re.Pattern[str] = re.compile(r"(^|[\r\n\t ]) ")

_NEWLINE_PATTERN: re.Pattern[str] = re.compile(r"\r\n|\n|\r")

_TAB_RUN_PATTERN: re.Pattern[str] = re.compile(r"\t+")

_NBSP_ENTITY = "&#160;"
_LINE_BREAK = "<br>"
_TAB_SPAN = '<span style="white-space:pre">\\g<0></span>'

_SCRIPT_CLOSE = "</script>"


# ---------------------------------------------------------------------------
# Escaping
# ---------------------------------------------------------------------------


def _html_escape_to_string(text: str) -> str:
    """HTML-escape ``&``, ``<``, ``>``, ``"`` and ``'`` in *text*."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&apos;")
    )


def html_escape(
    text: str,
    options: EscapeOptions | Mapping[str, Any] | None = None,
) -> SafeHtml:
    """Return HTML-escaped *text* as ``SafeHtml``.

    Parameters
    ----------
    text:
        Untrusted plain text.
    options:
        ``EscapeOptions`` or a mapping of its fields.

        - ``preserve_spaces`` turns every second consecutive space into
          ``&#160;``.
        - ``preserve_newlines`` turns ``\\r\\n``, ``\\n`` and ``\\r`` into
          ``<br>``.
        - ``preserve_tabs`` wraps each run of tabs in a span styled
          ``white-space:pre``.

    Raises
    ------
    InvalidOptionsError
        If *options* does not validate.

    Examples
    --------
    >>> str(html_escape("<b>Tom & 'Jerry'</b>"))
    '&lt;b&gt;Tom &amp; &apos;Jerry&apos;&lt;/b&gt;'
    >>> str(html_escape("a  b", {"preserve_spaces": True}))
    'a &#160;b'
    """
    opts = coerce_options(EscapeOptions, options)
    escaped = _html_escape_to_string(text)
    if opts.preserve_spaces:
        escaped = _SPACE_PATTERN.sub(r"\1" + _NBSP_ENTITY, escaped)
    if opts.preserve_newlines:
        escaped = _NEWLINE_PATTERN.sub(_LINE_BREAK, escaped)
    if opts.preserve_tabs:
        escaped = _TAB_RUN_PATTERN.sub(_TAB_SPAN, escaped)
    return create_html(escaped)


# ---------------------------------------------------------------------------
# Script elements
# ---------------------------------------------------------------------------


def _attribute(name: str, value: str | None) -> str:
    if not value:
        return ""
    return f' {name}="{_html_escape_to_string(value)}"'


def script_to_html(
    script: SafeScript,
    options: ScriptOptions | Mapping[str, Any] | None = None,
) -> SafeHtml:
    """Return a ``<script>`` element with *script* as its inline body.

    Attributes are written in the order ``id``, ``nonce``, ``type``.

    Raises
    ------
    ForgedValueError
        If *script* is not a genuine ``SafeScript``.
    InvalidOptionsError
        If *options* does not validate.
    """
    opts = coerce_options(ScriptOptions, options)
    body = unwrap_script(script)
    tag = (
        "<script"
        + _attribute("id", opts.id)
        + _attribute("nonce", opts.nonce)
        + _attribute("type", opts.type)
        + f">{body}{_SCRIPT_CLOSE}"
    )
    return create_html(tag)


def script_url_to_html(
    src: TrustedResourceUrl,
    options: ScriptUrlOptions | Mapping[str, Any] | None = None,
) -> SafeHtml:
    """Return a ``<script src>`` element loading *src*.

    Supports CSP nonces and async loading.

    Raises
    ------
    ForgedValueError
        If *src* is not a genuine ``TrustedResourceUrl``.
    InvalidOptionsError
        If *options* does not validate.
    """
    opts = coerce_options(ScriptUrlOptions, options)
    url = unwrap_resource_url(src)
    tag = f'<script src="{_html_escape_to_string(url)}"'
    if opts.async_:
        tag += " async"
    tag += _attribute("nonce", opts.nonce)
    tag += f">{_SCRIPT_CLOSE}"
    return create_html(tag)


# ---------------------------------------------------------------------------
# Concatenation
# ---------------------------------------------------------------------------


def concat_htmls(htmls: Iterable[SafeHtml]) -> SafeHtml:
    """Create a ``SafeHtml`` by concatenating multiple ``SafeHtml`` values.

    Raises
    ------
    ForgedValueError
        If any element is not a genuine ``SafeHtml``.
    """
    return create_html("".join(unwrap_html(html) for html in htmls))
