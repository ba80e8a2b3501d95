"""Tests for the JSON persona store."""

import json

import pytest

from kalam_style.errors import PersonaNotFoundError
from kalam_style.persona import JsonPersonaStore

from conftest import make_fingerprint


@pytest.fixture
def store(tmp_path):
    return JsonPersonaStore(tmp_path / "personas")


class TestSavePersona:
    """Test creating and updating personas."""

    def test_new_persona_defaults(self, store):
        record = store.save_persona("Ada", original_texts=["Some text."], source_count=1)

        assert record.id
        assert record.status == "processing"
        assert record.linguistic_fingerprint is None
        assert (store.data_dir / f"{record.id}.json").exists()

    def test_index_tracks_personas(self, store):
        store.save_persona("Ada")
        store.save_persona("Grace")

        index = json.loads(store.index_file.read_text())
        assert index["total_personas"] == 2
        assert index["version"] == "1.0.0"
        assert {p["name"] for p in index["personas"]} == {"Ada", "Grace"}

    def test_update_merges_with_stored_record(self, store):
        created = store.save_persona("Ada", original_texts=["Some text."], source_count=1)
        fp = make_fingerprint()

        updated = store.save_persona("Ada", created.id, status="ready", linguistic_fingerprint=fp)

        assert updated.status == "ready"
        assert updated.original_texts == ["Some text."]
        assert updated.source_count == 1
        assert updated.created_at == created.created_at
        assert updated.linguistic_fingerprint == fp
        assert len(store.list_personas()) == 1

    def test_round_trip_through_disk(self, store):
        fp = make_fingerprint(favorite_words=("budget",))
        record = store.save_persona("Ada", linguistic_fingerprint=fp)

        reopened = JsonPersonaStore(store.data_dir)
        assert reopened.get_persona(record.id).linguistic_fingerprint == fp


class TestReadAndDelete:
    """Test listing, lookup and deletion."""

    def test_missing_persona(self, store):
        assert store.get_persona("nope") is None

    def test_list_newest_first(self, store):
        store.index_file.write_text(json.dumps({
            "personas": [
                {"id": "old", "name": "Old", "status": "ready", "source_count": 1,
                 "created_at": "2024-01-01T00:00:00", "updated_at": "2024-01-01T00:00:00"},
                {"id": "new", "name": "New", "status": "failed", "source_count": 2,
                 "created_at": "2024-06-01T00:00:00", "updated_at": "2024-06-01T00:00:00"},
            ],
            "last_updated": "2024-06-01T00:00:00",
            "version": "1.0.0",
            "total_personas": 2,
        }))

        assert [p.id for p in store.list_personas()] == ["new", "old"]

    def test_delete(self, store):
        record = store.save_persona("Ada")

        assert store.delete_persona(record.id) is True
        assert store.get_persona(record.id) is None
        assert store.list_personas() == []
        assert store.delete_persona(record.id) is False

    def test_delete_index_name_leaves_index_alone(self, store):
        store.save_persona("Ada")
        store.save_persona("Bob")

        assert store.delete_persona("index") is False
        assert store.index_file.exists()
        assert {p.name for p in store.list_personas()} == {"Ada", "Bob"}

    def test_delete_outside_data_dir_is_refused(self, store):
        victim = store.data_dir.parent / "victim.json"
        victim.write_text("{}")

        assert store.delete_persona("../victim") is False
        assert victim.exists()

    def test_delete_unlisted_file_is_kept(self, store):
        stray = store.data_dir / ("a" * 32 + ".json")
        stray.write_text("{}")

        assert store.delete_persona("a" * 32) is False
        assert stray.exists()

    @pytest.mark.parametrize("persona_id", ["index", "../victim", "a/b", ""])
    def test_invalid_ids_are_not_found(self, store, persona_id):
        assert store.get_persona(persona_id) is None

    def test_save_with_invalid_id_is_rejected(self, store):
        with pytest.raises(ValueError):
            store.save_persona("Ada", "../victim")
        assert not (store.data_dir.parent / "victim.json").exists()

    def test_corrupt_index_is_rebuilt(self, store):
        store.index_file.write_text("{not json")

        assert store.list_personas() == []
        assert json.loads(store.index_file.read_text())["personas"] == []

    def test_health(self, store):
        store.save_persona("Ada")
        health = store.health()
        assert health["total"] == 1
        assert health["data_dir"] == str(store.data_dir)


class TestFingerprintRepository:
    """Test the save/load fingerprint interface."""

    def test_save_and_load(self, store):
        record = store.save_persona("Ada")
        fp = make_fingerprint(tone="optimistic")

        store.save(record.id, fp)

        assert store.load(record.id) == fp

    def test_load_unknown(self, store):
        assert store.load("nope") is None

    def test_save_unknown(self, store):
        with pytest.raises(PersonaNotFoundError):
            store.save("nope", make_fingerprint())
