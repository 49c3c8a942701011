"""
Tests for the requests-based GamesAPI client.
"""

import json
from unittest.mock import MagicMock

import requests

from games_api.client import GamesAPI


def make_response(status_code, payload=None):
    response = requests.Response()
    response.status_code = status_code
    if payload is not None:
        response._content = json.dumps(payload).encode()
    else:
        response._content = b""
    response.url = "http://games.test/games"
    return response


def make_client(response):
    session = MagicMock(spec=requests.Session)
    session.request.return_value = response
    return GamesAPI(base_url="http://games.test/", session=session), session


class TestGamesAPI:

    def test_list_games(self):
        api, session = make_client(make_response(200, [{"id": 1, "name": "Chess"}]))

        games, error = api.list_games()

        assert error is None
        assert games == [{"id": 1, "name": "Chess"}]
        session.request.assert_called_once_with(
            method="GET", url="http://games.test/games", json=None, timeout=15
        )

    def test_create_game_sends_body(self):
        api, session = make_client(make_response(201, {"id": 1, "name": "Chess"}))

        game, error = api.create_game({"name": "Chess"})

        assert error is None
        assert game == {"id": 1, "name": "Chess"}
        assert session.request.call_args.kwargs["json"] == {"name": "Chess"}
        assert session.request.call_args.kwargs["method"] == "POST"

    def test_not_found_message(self):
        api, _ = make_client(make_response(404, {"message": "Game not found"}))

        game, error = api.get_game(7)

        assert game is None
        assert error == {"status_code": 404, "message": "Game not found"}

    def test_update_and_delete_acknowledge(self):
        api, session = make_client(make_response(200, {"message": "Game updated successfully"}))

        ok, error = api.update_game(1, {"name": "X"})
        assert ok is True and error is None
        assert session.request.call_args.kwargs["url"] == "http://games.test/games/1"

        session.request.return_value = make_response(404, {"message": "Game not found"})
        ok, error = api.delete_game(1)
        assert ok is False
        assert error["status_code"] == 404

    def test_network_error(self):
        session = MagicMock(spec=requests.Session)
        session.request.side_effect = requests.ConnectionError("refused")
        api = GamesAPI(base_url="http://games.test", session=session)

        games, error = api.list_games()

        assert games == []
        assert error == {"status_code": None, "message": "refused"}
