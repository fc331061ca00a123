"""Fixed option records accepted by the builders.

Options are closed records, not open dictionaries: unknown keys and
values of the wrong type are rejected, so the set of transformations a
builder can apply is always the one documented on the record.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from trustmark.exceptions import InvalidOptionsError

log = logging.getLogger(__name__)

__all__ = [
    "EscapeOptions",
    "ScriptOptions",
    "ScriptUrlOptions",
    "coerce_options",
]

M = TypeVar("M", bound=BaseModel)


class EscapeOptions(BaseModel):
    """Whitespace handling for ``html_escape``.

    All toggles default to off.  When several are on they are applied in
    a fixed order: spaces, then newlines, then tabs.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    preserve_spaces: bool = False
    preserve_newlines: bool = False
    preserve_tabs: bool = False


class ScriptOptions(BaseModel):
    """Attributes for an inline ``<script>`` element.

    Values are plain strings; they are escaped before being placed in the
    tag.  ``None`` or empty omits the attribute.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    id: str | None = None
    nonce: str | None = None
    type: str | None = None


class ScriptUrlOptions(BaseModel):
    """Attributes for an external ``<script src>`` element.

    ``async_`` may also be given under its attribute name, ``async``.
    """

    model_config = ConfigDict(
        frozen=True, extra="forbid", strict=True, populate_by_name=True,
    )

    async_: bool = Field(default=False, alias="async")
    nonce: str | None = None


def coerce_options(
    model: type[M],
    options: M | Mapping[str, Any] | None,
) -> M:
    """Return *options* as an instance of *model*.

    Parameters
    ----------
    model:
        Option record class.
    options:
        An instance of *model*, a mapping of its fields, or ``None`` for
        all defaults.

    Raises
    ------
    InvalidOptionsError
        If *options* is neither a *model* instance nor a mapping that
        validates against it.
    """
    if options is None:
        return model()
    if isinstance(options, model):
        return options
    if not isinstance(options, Mapping):
        msg = (
            f"{model.__name__} expected, got {type(options).__name__}"
        )
        raise InvalidOptionsError(msg)

    try:
        coerced = model.model_validate(dict(options))
    except ValidationError as exc:
        msg = f"invalid {model.__name__}: {exc}"
        raise InvalidOptionsError(msg) from exc

    log.debug("Coerced %s from mapping keys %s", model.__name__, sorted(options))
    return coerced
