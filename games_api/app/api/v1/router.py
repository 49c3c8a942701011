"""
Top-level router for version 1 of the API.

Only the games domain exists today.  The application decides where
this router is mounted (see ``Settings.api_prefix``).
"""

from fastapi import APIRouter

from .endpoints import games

router = APIRouter()

router.include_router(games.router, prefix="/games", tags=["games"])
