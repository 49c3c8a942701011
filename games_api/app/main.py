"""
Main entrypoint for the Games API.

``create_app`` assembles the FastAPI application: it sets up logging,
attaches a ``GameStore`` for the configured document, registers the
error handlers and includes the versioned router.  The store is opened
on startup and closed on shutdown.  An app built from the environment
is created at import time so it can be served directly::

    uvicorn games_api.app.main:app --port 3000
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, get_database_path, settings
from .core.errors import NotFoundError, not_found_handler
from .core.logging_config import setup_logging
from .core.responses import GameJSONResponse
from .core.store import GameStore


def create_app(config: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    config : Optional[Settings]
        Settings to use instead of the module-level ``settings``.  Tests
        pass one pointing at a temporary document.

    Returns
    -------
    FastAPI
        The configured application.  ``app.state.store`` holds its
        ``GameStore``.
    """
    config = config or settings
    setup_logging(config.log_level, config.log_file)
    logger = logging.getLogger(__name__)

    app = FastAPI(
        title=config.project_name,
        version=config.api_version,
        debug=config.debug,
        default_response_class=GameJSONResponse,
    )
    app.state.settings = config
    app.state.store = GameStore(get_database_path(config))

    app.add_exception_handler(NotFoundError, not_found_handler)
    app.include_router(v1_router, prefix=config.api_prefix)

    @app.on_event("startup")
    async def open_store() -> None:
        app.state.store.open()

    @app.on_event("shutdown")
    async def close_store() -> None:
        app.state.store.close()

    logger.debug("Application created with document %s", app.state.store.path)
    return app


app = create_app()
