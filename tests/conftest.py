"""
Shared fixtures for the librarymatch tests.

  • config           — a Config with a dummy key and short timeouts
  • client           — Flask test client for an app built from ``config``
  • fake_steam       — patches requests.get with a scripted Steam Web API
"""

from __future__ import annotations

from typing import Dict, List, Optional
from unittest.mock import patch

import pytest
import requests

from librarymatch import create_app
from librarymatch.config import Config
from tests.helpers import make_response


class FakeSteam:
    """Scripted stand-in for the two Steam endpoints.

    ``vanity`` maps vanity names to Steam IDs; anything else gets success 42.
    ``libraries`` maps Steam IDs to game lists; unknown IDs get an empty
    ``response`` like a private profile. IDs in ``broken`` raise a
    connection error on every call.
    """

    def __init__(self):
        self.vanity: Dict[str, str] = {}
        self.libraries: Dict[str, List[dict]] = {}
        self.broken: set = set()
        self.calls: List[tuple] = []

    def get(self, url: str, params: Optional[dict] = None, **kwargs) -> MagicMock:
        params = params or {}
        self.calls.append((url, dict(params)))

        if url.endswith("ISteamUser/ResolveVanityURL/v1/"):
            name = params["vanityurl"]
            if name in self.broken:
                raise requests.ConnectionError("connection refused")
            if name in self.vanity:
                return make_response(payload={"response": {"steamid": self.vanity[name], "success": 1}})
            return make_response(payload={"response": {"success": 42, "message": "No match"}})

        if url.endswith("IPlayerService/GetOwnedGames/v1/"):
            steamid = params["steamid"]
            if steamid in self.broken:
                raise requests.ConnectionError("connection refused")
            if steamid in self.libraries:
                games = self.libraries[steamid]
                return make_response(payload={"response": {"game_count": len(games), "games": games}})
            return make_response(payload={"response": {}})

        return make_response(status_code=404)

    def calls_to(self, method: str) -> List[dict]:
        return [params for url, params in self.calls if url.endswith(method)]


@pytest.fixture
def config() -> Config:
    return Config(steam_key="TESTKEY", connect_timeout=1.0, read_timeout=1.0)


@pytest.fixture
def app(config):
    app = create_app(config)
    app.testing = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def fake_steam():
    steam = FakeSteam()
    with patch("librarymatch.steam_utils.requests.get", side_effect=steam.get):
        yield steam
