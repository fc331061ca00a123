"""Process-wide settings for trustmark.

Settings are read from the environment once, on first access, and cached
as an immutable ``TrustmarkSettings``.  Builders and escapers take no
settings at all; only the reviewed conversions in
``trustmark.restricted`` consult them.

Environment variables
=====================

``TRUSTMARK_REQUIRE_JUSTIFICATION``
    When disabled (``0``, ``false``, ``no``, ``off``), reviewed
    conversions accept an empty justification.  Any other value, or the
    variable being unset, keeps the requirement on.
"""

from __future__ import annotations

import os
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from collections.abc import Mapping

__all__ = [
    "TrustmarkSettings",
    "get_settings",
    "reset_settings",
]

_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _env_flag(environ: Mapping[str, str], name: str, default: bool) -> bool:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() not in _FALSE_VALUES


@dataclass(frozen=True, slots=True)
class TrustmarkSettings:
    """Configuration for reviewed conversions.

    Attributes
    ----------
    require_justification : bool
        If True, ``*_safe_by_review`` functions reject a blank
        justification.  Default True.
    """

    ENV_REQUIRE_JUSTIFICATION: ClassVar[str] = "TRUSTMARK_REQUIRE_JUSTIFICATION"

    require_justification: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> TrustmarkSettings:
        """Build settings from *environ* (defaults to ``os.environ``)."""
        if environ is None:
            environ = os.environ
        return cls(
            require_justification=_env_flag(
                environ, cls.ENV_REQUIRE_JUSTIFICATION, default=True,
            ),
        )


_lock = threading.Lock()
_settings: TrustmarkSettings | None = None


def get_settings() -> TrustmarkSettings:
    """Return the cached settings, reading the environment on first call."""
    global _settings
    current = _settings
    if current is not None:
        return current

    with _lock:
        # Double-checked locking.
        if _settings is None:
            _settings = TrustmarkSettings.from_env()
        return _settings


def reset_settings() -> None:
    """Drop the cached settings (for testing)."""
    global _settings
    with _lock:
        _settings = None
