"""
Pytest fixtures for the Games API tests.
"""

import json

import pytest
from fastapi.testclient import TestClient

from games_api.app.core.config import Settings
from games_api.app.core.store import GameStore
from games_api.app.main import create_app


@pytest.fixture
def db_path(tmp_path):
    """Path of a games document inside a fresh temporary directory."""
    return tmp_path / "db.json"


@pytest.fixture
def store(db_path):
    """An opened store over an empty document."""
    game_store = GameStore(str(db_path))
    game_store.open()
    yield game_store
    game_store.close()


@pytest.fixture
def seeded_store(db_path):
    """An opened store preloaded with three games."""
    db_path.write_text(json.dumps({
        "games": [
            {"id": 1, "name": "A", "genre": "RPG"},
            {"id": 2, "name": "B", "genre": "Puzzle"},
            {"id": 3, "name": "C", "genre": "Racing"},
        ]
    }))
    game_store = GameStore(str(db_path))
    game_store.open()
    yield game_store
    game_store.close()


@pytest.fixture
def app_settings(db_path) -> Settings:
    return Settings(database_path=str(db_path), log_level="WARNING", api_prefix="")


@pytest.fixture
def client(app_settings):
    """TestClient whose startup opens a store on the temporary document."""
    with TestClient(create_app(app_settings)) as test_client:
        yield test_client
