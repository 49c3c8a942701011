"""
Exceptions shared by the store, the services and the HTTP layer.

``NotFoundError`` is turned into a ``{"message": ...}`` body by the
handler registered in ``main.create_app``.  ``StorageError`` has no
handler: a broken document surfaces as a plain 500 after the store
has logged the cause.
"""

from fastapi import Request
from fastapi.responses import JSONResponse

GAME_NOT_FOUND = "Game not found"


class NotFoundError(Exception):
    """Raised by endpoints when the requested record does not exist."""

    status_code = 404

    def __init__(self, message: str = GAME_NOT_FOUND) -> None:
        super().__init__(message)
        self.message = message


class StorageError(Exception):
    """The games document could not be read or written."""


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})
