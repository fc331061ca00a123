"""Shared fixtures for the trustmark test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from trustmark.config import reset_settings
from trustmark.internals import (
    SafeHtml,
    SafeScript,
    TrustedResourceUrl,
    create_html,
    create_resource_url,
    create_script,
)


@pytest.fixture()
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate a test from the caller's environment and cached settings."""
    monkeypatch.delenv("TRUSTMARK_REQUIRE_JUSTIFICATION", raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture()
def alert_script() -> SafeScript:
    """Return a trusted script calling ``alert(1)``."""
    return create_script("alert(1)")


@pytest.fixture()
def cdn_url() -> TrustedResourceUrl:
    """Return a trusted resource URL with a query string."""
    return create_resource_url("https://cdn.example.com/app.js?v=1&lang=en")


@pytest.fixture()
def html_parts() -> tuple[SafeHtml, SafeHtml, SafeHtml]:
    """Return three distinct trusted markup fragments."""
    return (
        create_html("<b>"),
        create_html("bold &amp; brave"),
        create_html("</b>"),
    )
