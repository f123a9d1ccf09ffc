"""
Shared fixtures for keyfmt tests.
Path: tests/conftest.py
"""

import pytest

from keyfmt import Key, TemplateStore


@pytest.fixture
def store():
    """Empty per-test template store."""
    return TemplateStore()


@pytest.fixture
def keys(store):
    """Key facade over the per-test store."""
    return Key(store)
