"""Tests for the Overrides record, its store and the storage backends."""

import json
import sqlite3
import threading

import pytest

from lexishape.config import Config
from lexishape.overrides import (
    MemoryBackend,
    Overrides,
    OverridesStore,
    SqliteBackend,
    build_store,
)
from lexishape.overrides.store import KEY_PREFIX


# ── Record ───────────────────────────────────────────────────────────────────


class TestOverridesRecord:
    def test_new_record_is_empty(self):
        assert Overrides().is_empty()

    def test_normalize_lowercases_keys(self):
        overrides = Overrides(do_not_change={"Data"}, plural={"Child": "Kids"})
        overrides.normalize()
        assert overrides.do_not_change == {"data"}
        assert overrides.plural == {"child": "Kids"}

    def test_dict_round_trip(self):
        overrides = Overrides(do_not_change={"b", "a"}, past={"dream": "dreamt"})
        data = overrides.to_dict()
        assert data["do_not_change"] == ["a", "b"]
        assert Overrides.from_dict(data) == overrides

    def test_from_dict_ignores_unknown_and_missing_keys(self):
        overrides = Overrides.from_dict({"plural": {"ox": "oxen"}, "extra": 1})
        assert overrides.plural == {"ox": "oxen"}
        assert overrides.past == {}

    def test_from_dict_rejects_bad_shape(self):
        with pytest.raises(ValueError):
            Overrides.from_dict({"plural": ["ox", "oxen"]})
        with pytest.raises(TypeError):
            Overrides.from_dict(["not", "a", "dict"])


# ── Store ────────────────────────────────────────────────────────────────────


class TestStore:
    def test_get_unknown_language_is_empty(self, store):
        assert store.get("en").is_empty()

    def test_set_and_get(self, store):
        store.set("en", Overrides(plural={"cactus": "cactuses"}))
        assert store.get("en").plural == {"cactus": "cactuses"}

    def test_set_normalizes_keys(self, store):
        store.set("en", Overrides(plural={"Child": "kids"}))
        assert store.get("en").plural == {"child": "kids"}

    def test_get_returns_copy(self, store):
        store.get("en").plural["child"] = "kids"
        assert store.get("en").plural == {}

    def test_update_mutates_and_returns_copy(self, store):
        result = store.update("en", lambda o: o.do_not_change.add("Data"))
        assert result.do_not_change == {"data"}
        result.do_not_change.add("other")
        assert store.get("en").do_not_change == {"data"}

    def test_regional_tags_share_record(self, store):
        store.update("en-US", lambda o: o.plural.update({"child": "kids"}))
        assert store.get("en-GB").plural == {"child": "kids"}
        assert store.get("EN").plural == {"child": "kids"}

    def test_languages_are_separate(self, store):
        store.update("de", lambda o: o.plural.update({"kind": "kinder"}))
        assert store.get("en").is_empty()

    def test_reset(self, store):
        store.set("en", Overrides(plural={"child": "kids"}))
        store.reset("en-US")
        assert store.get("en").is_empty()

    def test_concurrent_updates(self, store):
        def worker(n):
            for i in range(50):
                store.update("en", lambda o, key=f"w{n}-{i}": o.plural.update({key: "x"}))

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(store.get("en").plural) == 400


# ── Persistence ──────────────────────────────────────────────────────────────


class TestPersistence:
    def test_payload_key_and_format(self):
        backend = MemoryBackend()
        store = OverridesStore(backend)
        store.set("en-US", Overrides(do_not_change={"sheep"}, plural={"ox": "oxen"}))

        payload = json.loads(backend.load(KEY_PREFIX + "en"))
        assert payload["do_not_change"] == ["sheep"]
        assert payload["plural"] == {"ox": "oxen"}

    def test_sqlite_survives_new_store(self, tmp_path):
        path = tmp_path / "overrides.db"
        first = OverridesStore(SqliteBackend(path))
        first.update("zz", lambda o: o.plural.update({"child": "children"}))

        second = OverridesStore(SqliteBackend(path))
        assert second.get("zz").plural == {"child": "children"}

    def test_sqlite_upsert(self, tmp_path):
        backend = SqliteBackend(tmp_path / "overrides.db")
        backend.save("k", "one")
        backend.save("k", "two")
        assert backend.load("k") == "two"
        assert backend.load("missing") is None
        backend.close()

    def test_corrupt_payload_starts_empty(self, caplog):
        backend = MemoryBackend()
        backend.save(KEY_PREFIX + "en", "{not json")
        store = OverridesStore(backend)

        assert store.get("en").is_empty()
        assert "Failed to load overrides" in caplog.text

    def test_wrong_shape_payload_starts_empty(self):
        backend = MemoryBackend()
        backend.save(KEY_PREFIX + "en", json.dumps({"plural": ["ox"]}))
        assert OverridesStore(backend).get("en").is_empty()

    def test_failed_save_keeps_memory_value(self, caplog):
        class BrokenBackend(MemoryBackend):
            def save(self, key, payload):
                raise sqlite3.OperationalError("disk I/O error")

        store = OverridesStore(BrokenBackend())
        store.set("en", Overrides(plural={"child": "kids"}))

        assert store.get("en").plural == {"child": "kids"}
        assert "Failed to persist overrides" in caplog.text


class TestBuildStore:
    def test_memory_backend(self, tmp_path):
        store = build_store(Config(home=tmp_path, store_backend="memory"))
        assert isinstance(store.backend, MemoryBackend)

    def test_sqlite_backend_default_path(self, tmp_path):
        store = build_store(Config(home=tmp_path))
        assert isinstance(store.backend, SqliteBackend)
        assert store.backend.path == tmp_path / "overrides.db"
