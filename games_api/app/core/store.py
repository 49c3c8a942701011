"""
JSON document storage for the games collection.

All games live in a single file shaped like ``{"games": [...]}``.
``GameStore`` owns that file for the lifetime of the application: it
is opened when the app starts (creating an empty document if none
exists) and closed on shutdown.  Every read returns the whole document
and every write replaces it, pretty-printed with two-space indentation.

There is no locking between a ``read`` and the following ``write``.
Two requests interleaving their read-modify-write cycles can lose an
update; the last writer wins.
"""

import json
import logging
import os
import tempfile
from typing import Any, Dict

from fastapi import Request

from .errors import StorageError

logger = logging.getLogger(__name__)


class GameStore:
    """Whole-file access to the games document at ``path``."""

    def __init__(self, path: str) -> None:
        self.path = path
        self._open = False

    @property
    def is_open(self) -> bool:
        return self._open

    def open(self) -> None:
        """Make the store usable, writing an empty document if the file is missing."""
        if self._open:
            return
        if not os.path.exists(self.path):
            directory = os.path.dirname(os.path.abspath(self.path))
            os.makedirs(directory, exist_ok=True)
            self._open = True
            self.write({"games": []})
            logger.info("Created empty games document at %s", self.path)
        else:
            self._open = True
        logger.info("Game store opened: %s", self.path)

    def close(self) -> None:
        if self._open:
            self._open = False
            logger.info("Game store closed: %s", self.path)

    def read(self) -> Dict[str, Any]:
        """Load and return the whole document."""
        self._ensure_open()
        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                document = json.load(fh)
        except (OSError, json.JSONDecodeError) as exc:
            logger.exception("Could not read %s", self.path)
            raise StorageError(f"Could not read {self.path}: {exc}") from exc
        if not isinstance(document, dict) or not isinstance(document.get("games"), list):
            logger.error("Malformed games document %s: expected an object with a 'games' list", self.path)
            raise StorageError(f"Malformed games document {self.path}")
        return document

    def write(self, document: Dict[str, Any]) -> None:
        """Serialize ``document`` and swap it in place of the current file.

        The whole document is encoded before the file is touched and then
        written to a temporary file renamed over the original, so a failed
        write leaves the previous document intact.
        """
        self._ensure_open()
        try:
            text = json.dumps(document, indent=2)
        except (TypeError, ValueError) as exc:
            logger.exception("Could not serialize games document for %s", self.path)
            raise StorageError(f"Could not write {self.path}: {exc}") from exc

        dir_name = os.path.dirname(os.path.abspath(self.path))
        try:
            fd, tmp_path = tempfile.mkstemp(dir=dir_name, suffix=".tmp")
        except OSError as exc:
            logger.exception("Could not write %s", self.path)
            raise StorageError(f"Could not write {self.path}: {exc}") from exc
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(text)
            os.replace(tmp_path, self.path)
        except OSError as exc:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
            logger.exception("Could not write %s", self.path)
            raise StorageError(f"Could not write {self.path}: {exc}") from exc

    def _ensure_open(self) -> None:
        if not self._open:
            raise StorageError(f"Game store {self.path} is not open")


def get_store(request: Request) -> GameStore:
    """FastAPI dependency returning the store attached at startup."""
    return request.app.state.store
