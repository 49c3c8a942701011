"""
Game endpoints.

CRUD over the games collection.  Request bodies are free-form JSON
objects; the only field the service cares about is ``id``, which it
assigns on creation.  Missing games produce
``404 {"message": "Game not found"}``.
"""

import re
from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from games_api.app.core.errors import NotFoundError
from games_api.app.core.responses import GameJSONResponse
from games_api.app.core.store import GameStore, get_store
from games_api.app.schemas.game import Game, MessageResponse
from games_api.app.services.game_service import GameService

router = APIRouter()

NOT_FOUND_RESPONSE = {status.HTTP_404_NOT_FOUND: {"model": MessageResponse}}
GAME_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def get_game_service(store: GameStore = Depends(get_store)) -> GameService:
    return GameService(store)


def parse_game_id(game_id: str) -> int:
    """Parse the path id as plain ASCII decimal digits.

    Anything else (underscores, whitespace, non-ASCII digits) matches no game.
    """
    if not GAME_ID_PATTERN.fullmatch(game_id):
        raise NotFoundError()
    return int(game_id)


@router.get("", response_model=List[Game])
async def list_games(service: GameService = Depends(get_game_service)) -> GameJSONResponse:
    """Return all games in stored order."""
    games = await service.list_games()
    return GameJSONResponse(content=[game.model_dump() for game in games])


@router.get("/{game_id}", response_model=Game, responses=NOT_FOUND_RESPONSE)
async def get_game(game_id: str, service: GameService = Depends(get_game_service)) -> GameJSONResponse:
    game = await service.get_game(parse_game_id(game_id))
    if game is None:
        raise NotFoundError()
    return GameJSONResponse(content=game.model_dump())


@router.post("", response_model=Game, status_code=status.HTTP_201_CREATED)
async def create_game(
    fields: Dict[str, Any] = Body(..., examples=[{"name": "Chess"}]),
    service: GameService = Depends(get_game_service),
) -> GameJSONResponse:
    """Create a game.  The new ``id`` is one more than the highest stored id."""
    game = await service.create_game(fields)
    return GameJSONResponse(content=game.model_dump(), status_code=status.HTTP_201_CREATED)


@router.put("/{game_id}", response_model=MessageResponse, responses=NOT_FOUND_RESPONSE)
async def update_game(
    game_id: str,
    fields: Dict[str, Any] = Body(..., examples=[{"name": "Chess 960"}]),
    service: GameService = Depends(get_game_service),
) -> MessageResponse:
    """Merge the given fields into an existing game.

    Fields not present in the body are left untouched.  Returns an
    acknowledgment rather than the updated game.
    """
    try:
        updated = await service.update_game(parse_game_id(game_id), fields)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors(include_url=False)) from exc
    if not updated:
        raise NotFoundError()
    return MessageResponse(message="Game updated successfully")


@router.delete("/{game_id}", response_model=MessageResponse, responses=NOT_FOUND_RESPONSE)
async def delete_game(game_id: str, service: GameService = Depends(get_game_service)) -> MessageResponse:
    deleted = await service.delete_game(parse_game_id(game_id))
    if not deleted:
        raise NotFoundError()
    return MessageResponse(message="Game deleted successfully")
