"""``SafeScript``: script source that is safe to evaluate."""

from __future__ import annotations

from typing import ClassVar

from trustmark.internals.brand import (
    TrustedValue,
    is_trusted,
    make_trusted,
    unwrap_trusted,
)

__all__ = [
    "EMPTY_SCRIPT",
    "SafeScript",
    "create_script",
    "is_script",
    "unwrap_script",
]


class SafeScript(TrustedValue):
    """Script source known to be safe to evaluate."""

    __slots__ = ()

    category: ClassVar[str] = "script"


def create_script(script: str) -> SafeScript:
    """Brand *script* as ``SafeScript``.  Internal use only."""
    return make_trusted(SafeScript, script)


def unwrap_script(value: SafeScript) -> str:
    """Return the source held by *value*."""
    return unwrap_trusted(value, SafeScript)


def is_script(value: object) -> bool:
    """Return ``True`` if *value* is a genuine ``SafeScript``."""
    return is_trusted(value, SafeScript)


EMPTY_SCRIPT: SafeScript = create_script("")
