"""Overrides layer: user exceptions that beat every computed rule."""

from lexishape.overrides.backends import MemoryBackend, SqliteBackend
from lexishape.overrides.model import Overrides
from lexishape.overrides.store import (
    OverridesStore,
    build_store,
    default_store,
    reset_default_store,
)

__all__ = [
    "MemoryBackend",
    "Overrides",
    "OverridesStore",
    "SqliteBackend",
    "build_store",
    "default_store",
    "reset_default_store",
]
