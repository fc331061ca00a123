"""Builders for trusted values."""

from __future__ import annotations

from trustmark.builders.html_builders import (
    concat_htmls,
    html_escape,
    script_to_html,
    script_url_to_html,
)
from trustmark.builders.options import EscapeOptions, ScriptOptions, ScriptUrlOptions
from trustmark.builders.script_builders import concat_scripts, safe_script_with_args

__all__ = [
    "EscapeOptions",
    "ScriptOptions",
    "ScriptUrlOptions",
    "concat_htmls",
    "concat_scripts",
    "html_escape",
    "safe_script_with_args",
    "script_to_html",
    "script_url_to_html",
]
