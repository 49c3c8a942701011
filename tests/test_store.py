"""
Tests for the JSON document store.
"""

import json
import logging

import pytest

from games_api.app.core.errors import StorageError
from games_api.app.core.store import GameStore


class TestGameStore:
    """Open/close lifecycle and whole-document I/O."""

    def test_open_creates_empty_document(self, tmp_path):
        path = tmp_path / "nested" / "db.json"
        store = GameStore(str(path))

        store.open()

        assert path.exists()
        assert json.loads(path.read_text()) == {"games": []}
        assert store.is_open

    def test_open_keeps_existing_document(self, db_path):
        db_path.write_text(json.dumps({"games": [{"id": 4, "name": "Go"}]}))
        store = GameStore(str(db_path))

        store.open()

        assert store.read() == {"games": [{"id": 4, "name": "Go"}]}

    def test_write_is_pretty_printed(self, store, db_path):
        store.write({"games": [{"id": 1, "name": "Chess"}]})

        text = db_path.read_text()
        assert text == json.dumps({"games": [{"id": 1, "name": "Chess"}]}, indent=2)

    def test_write_then_read_keeps_fields_and_types(self, store):
        document = {
            "games": [
                {"id": 1, "name": "Chess", "players": 2, "rating": 4.5, "tags": ["classic"], "online": True},
                {"id": 2, "meta": {"publisher": None, "year": 1475}},
            ]
        }

        store.write(document)

        assert store.read() == document

    def test_failed_write_keeps_previous_document(self, store, db_path):
        store.write({"games": [{"id": 1, "name": "Chess"}]})
        before = db_path.read_text()

        with pytest.raises(StorageError):
            store.write({"games": [{"id": 2, "tags": {"not", "serializable"}}]})

        assert db_path.read_text() == before
        assert [p.name for p in db_path.parent.iterdir()] == ["db.json"]

    def test_lone_surrogate_is_escaped_on_disk(self, store, db_path):
        store.write({"games": [{"id": 1, "name": "\ud800"}]})

        assert "\\ud800" in db_path.read_text()
        assert store.read() == {"games": [{"id": 1, "name": "\ud800"}]}

    def test_closed_store_refuses_access(self, db_path):
        store = GameStore(str(db_path))
        with pytest.raises(StorageError):
            store.read()

        store.open()
        store.close()
        assert not store.is_open
        with pytest.raises(StorageError):
            store.write({"games": []})

    def test_corrupt_document_is_logged_and_raised(self, store, db_path, caplog):
        db_path.write_text("{not json")

        with caplog.at_level(logging.ERROR):
            with pytest.raises(StorageError):
                store.read()

        assert "Could not read" in caplog.text

    def test_document_without_games_list(self, store, db_path):
        db_path.write_text(json.dumps({"items": []}))

        with pytest.raises(StorageError):
            store.read()
