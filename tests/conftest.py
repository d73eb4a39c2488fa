"""Shared fixtures: every test runs against a throwaway LEXISHAPE_HOME.

Engines built by the `engine` fixture use an in-memory store, so tests
never read or write the user's real overrides.
"""

import pytest

from lexishape.engine import MorphologyEngine, reset_default_engine
from lexishape.overrides import MemoryBackend, OverridesStore, reset_default_store


@pytest.fixture(autouse=True)
def lexishape_home(tmp_path, monkeypatch):
    home = tmp_path / "lexishape-home"
    monkeypatch.setenv("LEXISHAPE_HOME", str(home))
    reset_default_store()
    reset_default_engine()
    yield home
    reset_default_store()
    reset_default_engine()


@pytest.fixture
def store():
    return OverridesStore(MemoryBackend())


@pytest.fixture
def engine(store):
    return MorphologyEngine("en", store=store)
