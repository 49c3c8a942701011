"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all: it listens on port 3000
and keeps its games in ``db.json`` next to the package.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Games API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Path of the JSON document holding the games collection.  Relative
    # paths are resolved against the project root by ``get_database_path``.
    database_path: str = os.getenv("DATABASE_PATH", "db.json")

    # Routes are mounted at the root by default (``/games``).  Set
    # API_PREFIX (e.g. ``/api/v1``) to move them under a prefix.
    api_prefix: str = os.getenv("API_PREFIX", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))


def get_database_path(config: "Settings") -> str:
    """Return the absolute path of the games document for ``config``."""
    if os.path.isabs(config.database_path):
        return config.database_path
    base_dir = os.path.dirname(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))
    return os.path.abspath(os.path.join(base_dir, config.database_path))


# Environment variables must be set before this module is imported.
settings = Settings()
