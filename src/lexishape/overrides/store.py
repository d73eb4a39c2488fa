"""Language-scoped, thread-safe store for user overrides.

Reads are served from an in-memory cache; writes go to the cache first and
are then persisted through a backend. Persistence is best-effort: a failed
load or save is logged and the in-memory value stays authoritative for the
rest of the session.
"""

from __future__ import annotations

import copy
import json
import logging
import sqlite3
import threading
from typing import Callable

from lexishape.config import Config, load_config
from lexishape.language import primary_language
from lexishape.overrides.backends import Backend, MemoryBackend, SqliteBackend
from lexishape.overrides.model import Overrides

logger = logging.getLogger(__name__)

KEY_PREFIX = "MorphOverrides."

_PERSISTENCE_ERRORS = (sqlite3.Error, OSError, ValueError, TypeError, KeyError)


class OverridesStore:
    """One Overrides record per primary language subtag.

    A single lock serializes get/set/update/reset. Callers always receive
    copies, so mutating a returned record has no effect until it is handed
    back through set() or update().
    """

    def __init__(self, backend: Backend | None = None) -> None:
        self.backend: Backend = backend if backend is not None else MemoryBackend()
        self._by_language: dict[str, Overrides] = {}
        self._lock = threading.Lock()

    # ── Public API ────────────────────────────────────────────────────────

    def get(self, language: str) -> Overrides:
        with self._lock:
            return copy.deepcopy(self._current(primary_language(language)))

    def set(self, language: str, overrides: Overrides) -> None:
        with self._lock:
            key = primary_language(language)
            value = copy.deepcopy(overrides)
            value.normalize()
            self._by_language[key] = value
            self._persist(key, value)

    def update(self, language: str, mutate: Callable[[Overrides], None]) -> Overrides:
        """Load the current record, mutate it in place, store and persist it.

        Returns a copy of the stored result.
        """
        with self._lock:
            key = primary_language(language)
            current = copy.deepcopy(self._current(key))
            mutate(current)
            current.normalize()
            self._by_language[key] = current
            self._persist(key, current)
            return copy.deepcopy(current)

    def reset(self, language: str) -> None:
        self.set(language, Overrides())

    # ── Internals ─────────────────────────────────────────────────────────

    def _current(self, key: str) -> Overrides:
        cached = self._by_language.get(key)
        if cached is not None:
            return cached
        loaded = self._load(key)
        value = loaded if loaded is not None else Overrides()
        self._by_language[key] = value
        return value

    def _persist(self, key: str, overrides: Overrides) -> None:
        try:
            payload = json.dumps(overrides.to_dict(), ensure_ascii=False, sort_keys=True)
            self.backend.save(KEY_PREFIX + key, payload)
        except _PERSISTENCE_ERRORS:
            logger.exception("Failed to persist overrides for %r; keeping in-memory value", key)

    def _load(self, key: str) -> Overrides | None:
        try:
            payload = self.backend.load(KEY_PREFIX + key)
            if payload is None:
                return None
            return Overrides.from_dict(json.loads(payload))
        except _PERSISTENCE_ERRORS:
            logger.exception("Failed to load overrides for %r; starting empty", key)
            return None


# ── Process-wide default ──────────────────────────────────────────────────────

_default_store: OverridesStore | None = None
_default_lock = threading.Lock()


def build_store(cfg: Config) -> OverridesStore:
    """Create a store for a lexishape.config.Config."""
    if cfg.store_backend == "memory":
        logger.debug("Using in-memory overrides store")
        return OverridesStore(MemoryBackend())
    logger.debug("Using SQLite overrides store at %s", cfg.resolved_store_path)
    return OverridesStore(SqliteBackend(cfg.resolved_store_path))


def default_store() -> OverridesStore:
    """Lazy process-wide store built from the user's config.

    Opt-in convenience for callers that do not inject their own store.
    """
    global _default_store
    with _default_lock:
        if _default_store is None:
            _default_store = build_store(load_config())
        return _default_store


def reset_default_store() -> None:
    """Forget the process-wide store (the next default_store() rebuilds it)."""
    global _default_store
    with _default_lock:
        _default_store = None
