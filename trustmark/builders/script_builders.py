"""Builders that produce ``SafeScript``."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from trustmark.exceptions import InvalidOptionsError
from trustmark.internals.script_impl import SafeScript, create_script, unwrap_script

if TYPE_CHECKING:
    from collections.abc import Iterable

__all__ = [
    "concat_scripts",
    "safe_script_with_args",
]


def _serialize_arg(value: Any) -> str:
    """JSON-encode *value* so it cannot close an enclosing script element."""
    try:
        encoded = json.dumps(value)
    except (TypeError, ValueError) as exc:
        msg = f"script argument of type {type(value).__name__} is not JSON serializable"
        raise InvalidOptionsError(msg) from exc
    # '<' only occurs inside JSON strings, where \x3c is an equivalent escape.
    return encoded.replace("<", "\\x3c")


def safe_script_with_args(function_source: SafeScript, *args: Any) -> SafeScript:
    """Return a script that calls *function_source* with *args*.

    The result has the form ``(SOURCE)(ARG1,ARG2,...)``.  Each argument is
    JSON-encoded, so it is data to the script and never code.

    Raises
    ------
    ForgedValueError
        If *function_source* is not a genuine ``SafeScript``.
    InvalidOptionsError
        If an argument is not JSON serializable.

    Examples
    --------
    >>> from trustmark.restricted import script_safe_by_review
    >>> fn = script_safe_by_review("function(a){alert(a)}", "static source")
    >>> str(safe_script_with_args(fn, "</script>"))
    '(function(a){alert(a)})("\\\\x3c/script>")'
    """
    source = unwrap_script(function_source)
    rendered_args = ",".join(_serialize_arg(arg) for arg in args)
    return create_script(f"({source})({rendered_args})")


def concat_scripts(scripts: Iterable[SafeScript]) -> SafeScript:
    """Create a ``SafeScript`` by concatenating multiple ``SafeScript`` values.

    Raises
    ------
    ForgedValueError
        If any element is not a genuine ``SafeScript``.
    """
    return create_script("".join(unwrap_script(script) for script in scripts))
