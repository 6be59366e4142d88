"""Shared test fixtures for the response-wrapper test suite."""

from __future__ import annotations

import os

import pytest

from response_wrapper.config.settings import ResponseWrapperSettings


# ---------------------------------------------------------------------------
# Keep host environment out of ResponseWrapperSettings
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clear_wrapper_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop any RESPONSE_WRAPPER_* variables so defaults apply in tests."""
    for key in list(os.environ):
        if key.startswith("RESPONSE_WRAPPER_"):
            monkeypatch.delenv(key, raising=False)


# ---------------------------------------------------------------------------
# Settings fixture
# ---------------------------------------------------------------------------

@pytest.fixture
def settings() -> ResponseWrapperSettings:
    """Test settings with a small page size and cap."""
    return ResponseWrapperSettings(default_page_size=5, max_page_size=20)
