"""Shared fixtures for Accept-Language tests."""

import pytest

from accept_language.configuration import get_settings


MOCK_ACCEPT_LANGUAGE = "en-US, de;q=0.7, jp;q=0.1"


@pytest.fixture
def mock_accept_language():
    """The reference header used across parser and negotiation tests."""
    return MOCK_ACCEPT_LANGUAGE


@pytest.fixture
def accept_language_headers():
    """Collection of Accept-Language headers for testing."""
    return {
        "simple_en": "en",
        "specific_en_us": "en-US",
        "with_quality": "en-US,en;q=0.9,fr;q=0.8",
        "multiple": "fr-FR,fr;q=0.9,en-US;q=0.8,en;q=0.7",
        "wildcard": "en-US,en;q=0.9,*;q=0.8",
        "invalid_quality": "en;q=invalid,fr",
        "spaced": " en-US , en-GB ; q = 0.5 ",
    }


@pytest.fixture
def default_language_setting(monkeypatch):
    """Set the configured best_match fallback for the duration of a test."""

    def _set(language):
        monkeypatch.setattr(
            get_settings().negotiation, "default_language", language, raising=False
        )

    return _set
