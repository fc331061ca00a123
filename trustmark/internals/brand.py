"""Brand marker and the base class for every trusted value.

A trusted value is only as good as the guarantee that nobody outside the
sanctioned factories can build one.  Python has no module privacy, so the
guarantee is enforced at runtime: a private marker object is stored inside
every wrapper when it is created, and every unwrap checks the marker by
identity before handing the payload out.

The marker is not part of any public API.  ``make_trusted`` is the only
sanctioned code path that passes it to a constructor, and only the
``*_impl`` modules in this package call ``make_trusted``.

The marker is not secret, though.  Every genuine instance stores it in its
``_brand`` slot, so code that reads private attributes can lift it from any
existing value and pass it to a constructor.  The check stops accidental
wrapping and naive forgery (home-made markers, ``object.__new__``, pickling);
it does not stop code that deliberately reaches into private state.  Treat
access to ``_brand`` the same way as a call to ``make_trusted``: only reviewed
code may do it.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, NoReturn, TypeVar

from trustmark.exceptions import ForgedValueError

log = logging.getLogger(__name__)

__all__ = [
    "TrustedValue",
    "is_trusted",
    "make_trusted",
    "unwrap_trusted",
]

_BRAND = object()

T = TypeVar("T", bound="TrustedValue")


def _reject(message: str) -> NoReturn:
    log.error("Brand check failed: %s", message)
    raise ForgedValueError(message)


class TrustedValue:
    """Immutable wrapper asserting its payload is safe for one kind of sink.

    Subclasses set ``category`` and add nothing else that carries state.
    Instances cannot be mutated, pickled or meaningfully copied; equality
    is by category and payload.
    """

    __slots__ = ("_brand", "_payload")

    category: ClassVar[str] = "trusted value"

    def __init__(self, payload: str, brand: object) -> None:
        if brand is not _BRAND:
            _reject(
                f"{type(self).__name__} can only be created by trustmark factories"
            )
        if not isinstance(payload, str):
            _reject(
                f"{type(self).__name__} payload must be str, "
                f"got {type(payload).__name__}"
            )
        object.__setattr__(self, "_payload", payload)
        object.__setattr__(self, "_brand", brand)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __str__(self) -> str:
        return unwrap_trusted(self, type(self))

    def __repr__(self) -> str:
        if not is_trusted(self, type(self)):
            return f"<forged {type(self).__name__}>"
        return f"{type(self).__name__}({self._payload!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        # Forged instances are only ever equal to themselves.
        if not (is_trusted(self, type(self)) and is_trusted(other, type(self))):
            return self is other
        return self._payload == other._payload

    def __hash__(self) -> int:
        if not is_trusted(self, type(self)):
            return object.__hash__(self)
        return hash((type(self).__name__, self._payload))

    def __copy__(self: T) -> T:
        return self

    def __deepcopy__(self: T, memo: dict[int, Any]) -> T:
        return self

    def __reduce__(self) -> NoReturn:
        raise TypeError(f"{type(self).__name__} values cannot be pickled")


def make_trusted(category: type[T], payload: str) -> T:
    """Brand *payload* as a value of *category*.

    Only the ``create_*`` functions of the ``*_impl`` modules call this.
    """
    return category(payload, _BRAND)


def is_trusted(value: object, category: type[TrustedValue]) -> bool:
    """Return ``True`` if *value* is a genuine instance of *category*."""
    return (
        isinstance(value, category)
        and getattr(value, "_brand", None) is _BRAND
    )


def unwrap_trusted(value: object, category: type[TrustedValue]) -> str:
    """Return the payload of *value* after checking its brand.

    Raises
    ------
    ForgedValueError
        If *value* is not an instance of *category*, or was not created
        through ``make_trusted``.
    """
    if not isinstance(value, category):
        _reject(
            f"expected {category.__name__}, got {type(value).__name__}"
        )
    if getattr(value, "_brand", None) is not _BRAND:
        _reject(f"{type(value).__name__} carries no valid brand")
    return value._payload
