"""
Service layer for games.

``GameService`` implements list, get, create, update and delete on top
of a ``GameStore``.  Every call reads the whole document, scans the
``games`` list linearly and, for mutations, writes the whole document
back.  Lookups that miss return ``None``/``False``; the endpoints turn
that into a 404.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from games_api.app.core.store import GameStore
from games_api.app.schemas.game import Game

logger = logging.getLogger(__name__)


def next_game_id(games: List[Dict[str, Any]]) -> int:
    """Return ``max(existing ids) + 1``, or ``1`` for an empty collection."""
    ids = [g["id"] for g in games if isinstance(g.get("id"), int)]
    return max(ids, default=0) + 1


def _find_index(games: List[Dict[str, Any]], game_id: int) -> int:
    for index, game in enumerate(games):
        if game.get("id") == game_id:
            return index
    return -1


class GameService:
    """CRUD operations over the games document."""

    def __init__(self, store: GameStore) -> None:
        self.store = store

    async def list_games(self) -> List[Game]:
        """Return every game in stored order."""
        document = self.store.read()
        return [Game.model_validate(g) for g in document["games"]]

    async def get_game(self, game_id: int) -> Optional[Game]:
        """Return the first game whose ``id`` matches, or ``None``."""
        games = self.store.read()["games"]
        index = _find_index(games, game_id)
        if index == -1:
            return None
        return Game.model_validate(games[index])

    async def create_game(self, fields: Dict[str, Any]) -> Game:
        """Append a new game with a store-assigned ``id`` and persist it.

        A client-supplied ``id`` is ignored.
        """
        document = self.store.read()
        games = document["games"]
        record: Dict[str, Any] = {"id": next_game_id(games)}
        record.update((key, value) for key, value in fields.items() if key != "id")
        games.append(record)
        self.store.write(document)
        logger.info("Created game %s", record["id"])
        return Game.model_validate(record)

    async def update_game(self, game_id: int, fields: Dict[str, Any]) -> bool:
        """Shallow-merge ``fields`` onto the matching game.

        Returns ``False`` if no game has ``game_id``.  ``fields`` may
        replace the ``id`` itself; the merged record is validated so the
        stored ``id`` stays an integer (``pydantic.ValidationError``
        otherwise, and nothing is written).
        """
        document = self.store.read()
        games = document["games"]
        index = _find_index(games, game_id)
        if index == -1:
            return False
        merged = {**games[index], **fields}
        merged["id"] = Game.model_validate(merged).id
        games[index] = merged
        self.store.write(document)
        logger.info("Updated game %s", game_id)
        return True

    async def delete_game(self, game_id: int) -> bool:
        """Remove the matching game.  Returns ``False`` if none matched."""
        document = self.store.read()
        games = document["games"]
        index = _find_index(games, game_id)
        if index == -1:
            return False
        del games[index]
        self.store.write(document)
        logger.info("Deleted game %s", game_id)
        return True
