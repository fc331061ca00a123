"""Unit tests for trustmark.internals — brand checks and trusted value behaviour."""

from __future__ import annotations

import copy
import logging
import pickle

import pytest
from hypothesis import given
from hypothesis import strategies as st

from trustmark.exceptions import ForgedValueError, TrustmarkError
from trustmark.internals import (
    EMPTY_HTML,
    EMPTY_SCRIPT,
    SafeHtml,
    SafeScript,
    TrustedResourceUrl,
    create_html,
    create_resource_url,
    create_script,
    is_html,
    is_resource_url,
    is_script,
    unwrap_html,
    unwrap_resource_url,
    unwrap_script,
)
from trustmark.internals import brand
from trustmark.internals.brand import TrustedValue, make_trusted

# ---------------------------------------------------------------------------
# Forgery Tests
# ---------------------------------------------------------------------------


class TestForgery:
    """Values not created by a sanctioned factory are rejected."""

    @pytest.mark.parametrize("category", [SafeHtml, SafeScript, TrustedResourceUrl])
    def test_direct_construction_rejected(self, category: type[TrustedValue]) -> None:
        """Calling the class with a home-made marker fails fast."""
        with pytest.raises(ForgedValueError):
            category("<script>alert(1)</script>", object())

    def test_construction_without_marker_rejected(self) -> None:
        """The marker argument is required."""
        with pytest.raises(TypeError):
            SafeHtml("<b>")  # type: ignore[call-arg]

    def test_object_new_bypass_rejected_on_unwrap(self) -> None:
        """An instance built with object.__new__ fails the unwrap check."""
        forged = object.__new__(SafeHtml)
        object.__setattr__(forged, "_payload", "<script>alert(1)</script>")
        object.__setattr__(forged, "_brand", object())
        with pytest.raises(ForgedValueError):
            unwrap_html(forged)
        assert not is_html(forged)

    def test_empty_instance_rejected_on_unwrap(self) -> None:
        """An instance with no slots set fails the unwrap check."""
        forged = object.__new__(SafeScript)
        with pytest.raises(ForgedValueError):
            unwrap_script(forged)
        assert repr(forged) == "<forged SafeScript>"

    def test_str_of_forged_value_rejected(self) -> None:
        """The sink-facing str() conversion also checks the brand."""
        forged = object.__new__(SafeHtml)
        with pytest.raises(ForgedValueError):
            str(forged)

    def test_non_string_payload_rejected(self) -> None:
        """Payloads must be str even through the sanctioned path."""
        with pytest.raises(ForgedValueError):
            make_trusted(SafeHtml, b"<b>")  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "value",
        ["<b>", None, 42, b"<b>"],
    )
    def test_unwrap_rejects_non_trusted(self, value: object) -> None:
        """Plain values are never unwrapped."""
        with pytest.raises(ForgedValueError):
            unwrap_html(value)  # type: ignore[arg-type]

    def test_unwrap_rejects_wrong_category(self) -> None:
        """A trusted script is not trusted markup."""
        script = create_script("alert(1)")
        with pytest.raises(ForgedValueError):
            unwrap_html(script)  # type: ignore[arg-type]
        with pytest.raises(ForgedValueError):
            unwrap_resource_url(script)  # type: ignore[arg-type]

    def test_forged_value_error_hierarchy(self) -> None:
        """ForgedValueError is both a TrustmarkError and a TypeError."""
        assert issubclass(ForgedValueError, TrustmarkError)
        assert issubclass(ForgedValueError, TypeError)

    def test_marker_lifted_from_genuine_value_is_accepted(self) -> None:
        """The marker stored on a genuine value passes the brand check.

        Reading ``_brand`` is as privileged as calling ``make_trusted``; the
        module docstring documents this limit.
        """
        lifted = SafeHtml("<img src=x onerror=alert(1)>", EMPTY_HTML._brand)
        assert is_html(lifted)
        assert "_brand" in (brand.__doc__ or "")

    def test_forgery_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """A failed brand check is logged at ERROR."""
        with caplog.at_level(logging.ERROR, logger="trustmark.internals.brand"):
            with pytest.raises(ForgedValueError):
                unwrap_html("<b>")  # type: ignore[arg-type]
        assert any("Brand check failed" in r.message for r in caplog.records)


# ---------------------------------------------------------------------------
# Immutability Tests
# ---------------------------------------------------------------------------


class TestImmutability:
    """Trusted values cannot be altered after creation."""

    def test_payload_assignment_rejected(self) -> None:
        """Overwriting the payload raises AttributeError."""
        html = create_html("<b>")
        with pytest.raises(AttributeError):
            html._payload = "<script>"  # type: ignore[misc]
        assert unwrap_html(html) == "<b>"

    def test_new_attribute_rejected(self) -> None:
        """No new attributes can be attached."""
        html = create_html("<b>")
        with pytest.raises(AttributeError):
            html.extra = 1  # type: ignore[attr-defined]

    def test_delete_rejected(self) -> None:
        """Slots cannot be deleted."""
        html = create_html("<b>")
        with pytest.raises(AttributeError):
            del html._payload

    def test_copy_returns_same_instance(self) -> None:
        """copy and deepcopy hand back the original value."""
        html = create_html("<b>")
        assert copy.copy(html) is html
        assert copy.deepcopy(html) is html

    def test_pickle_refused(self) -> None:
        """Pickling would let a payload round-trip outside the brand."""
        with pytest.raises(TypeError):
            pickle.dumps(create_html("<b>"))


# ---------------------------------------------------------------------------
# Value Semantics Tests
# ---------------------------------------------------------------------------


class TestValueSemantics:
    """Equality, hashing and string conversion."""

    def test_str_returns_payload(self) -> None:
        """str() is the sink-facing conversion."""
        assert str(create_html("<b>")) == "<b>"

    def test_repr_names_category(self) -> None:
        """repr() shows the class and payload."""
        assert repr(create_script("x()")) == "SafeScript('x()')"

    def test_equal_payloads_equal(self) -> None:
        """Values of one category with the same payload are equal."""
        assert create_html("<b>") == create_html("<b>")
        assert hash(create_html("<b>")) == hash(create_html("<b>"))

    def test_genuine_never_equals_forged(self) -> None:
        """Comparing with a forged instance is False, not an error."""
        genuine = create_html("<b>")
        forged = object.__new__(SafeHtml)
        object.__setattr__(forged, "_payload", "<b>")
        object.__setattr__(forged, "_brand", object())
        assert genuine != forged
        assert forged != genuine
        assert not (genuine == forged)
        assert forged == forged

    def test_forged_instance_hashable(self) -> None:
        """Forged instances hash by identity and never collide into a set."""
        forged = object.__new__(SafeHtml)
        assert hash(forged) == hash(forged)
        assert len({create_html(""), forged}) == 2

    def test_different_categories_not_equal(self) -> None:
        """Same payload in different categories is not equal."""
        assert create_html("x") != create_script("x")
        assert create_html("x") != "x"

    def test_html_protocol(self) -> None:
        """SafeHtml exposes __html__ for template engines."""
        assert create_html("<b>").__html__() == "<b>"

    def test_empty_constants(self) -> None:
        """EMPTY_HTML and EMPTY_SCRIPT are genuine and empty."""
        assert is_html(EMPTY_HTML)
        assert unwrap_html(EMPTY_HTML) == ""
        assert is_script(EMPTY_SCRIPT)
        assert unwrap_script(EMPTY_SCRIPT) == ""

    def test_is_predicates(self) -> None:
        """is_* only accept genuine values of their own category."""
        url = create_resource_url("https://example.com/a.js")
        assert is_resource_url(url)
        assert not is_html(url)
        assert not is_script("alert(1)")

    @given(st.text())
    def test_round_trip_through_brand(self, payload: str) -> None:
        """Property: a branded payload unwraps to itself."""
        assert unwrap_html(create_html(payload)) == payload
        assert unwrap_script(create_script(payload)) == payload
        assert unwrap_resource_url(create_resource_url(payload)) == payload
