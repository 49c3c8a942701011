"""Games API client.

A thin wrapper around the games HTTP endpoints built on ``requests``.
Methods never raise on HTTP or network failures; each one returns a
``(data, error)`` tuple where ``error`` is ``None`` on success or a
dictionary with ``status_code`` and ``message``:

* :meth:`GamesAPI.list_games` – all stored games.
* :meth:`GamesAPI.get_game` – a single game by id.
* :meth:`GamesAPI.create_game` – store a new game, returns it with its id.
* :meth:`GamesAPI.update_game` – merge fields into an existing game.
* :meth:`GamesAPI.delete_game` – remove a game.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests

logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class GamesAPI:
    """Client for the games service at ``base_url``."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Service root including any API prefix, e.g.
                ``http://localhost:3000``.
            session: Optional requests session, created if omitted.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Send a request and return ``(parsed JSON, None)`` or ``(None, error)``."""
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("message") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def list_games(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/games")
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_game(self, game_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/games/{game_id}")

    def create_game(self, fields: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a game.  The returned game carries the id the server assigned."""
        return self._request("POST", "/games", json_body=fields)

    def update_game(self, game_id: Any, fields: Dict[str, Any]) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("PUT", f"/games/{game_id}", json_body=fields)
        return error is None, error

    def delete_game(self, game_id: Any) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/games/{game_id}")
        return error is None, error
