"""Shared test configuration and pytest markers."""

import pytest

from services import keyword_extractor


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "nltk: exercises the NLTK chunking path with a stub tagger"
    )


@pytest.fixture(autouse=True)
def no_nltk_tagger(monkeypatch):
    """Run every test as if NLTK tagger data were not installed.

    Keeps phrase extraction deterministic whatever data the machine has.
    Tests that need tagging patch ``_tag`` or ``_ne_tree`` themselves.
    """
    monkeypatch.setattr(keyword_extractor, "_get_tagger", lambda: None)
