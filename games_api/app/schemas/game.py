"""
Pydantic models for games.

A game has no fixed schema.  ``Game`` only types the reserved ``id``;
any other key the client sends is kept as an extra field, in the order
it was received, and written back out unchanged.
"""

from pydantic import BaseModel, ConfigDict


class Game(BaseModel):
    """A stored game: an integer ``id`` plus arbitrary caller fields."""

    id: int

    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={"example": {"id": 1, "name": "Chess", "genre": "Strategy"}},
    )


class MessageResponse(BaseModel):
    """Acknowledgment or error body, e.g. ``{"message": "Game not found"}``."""

    message: str
