# This file is a part of librarymatch
# Copyright (C) 2020 TGRCDev

# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.

# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

import logging
from typing import Any, Dict, List, NamedTuple, Optional, Tuple, Union

import requests

from .config import Config
from .exceptions import SteamAPIException, SteamBadVanityUrlException, SteamUserCouldntGetGamesException

api_base = "https://api.steampowered.com/"

logger = logging.getLogger(__name__)

Timeout = Tuple[Optional[float], Optional[float]]

# Shared GET against the Steam Web API
#
# Returns: the decoded JSON body
# Raises:
#    requests.RequestException: connection problems and timeouts
#    SteamAPIException: any status other than 200 (403 means a bad api key)
#    ValueError: the body is not JSON
def _steam_get(method: str, params: Dict[str, Any], timeout: Timeout) -> Any:
    r = requests.get(api_base + method, params, timeout=timeout)
    if r.status_code != 200:
        raise SteamAPIException(r.status_code)
    return r.json()

# Ask Steam which account a vanity name belongs to
#
# Returns: the SteamID64 as a string
# Raises SteamBadVanityUrlException if Steam reports no match (success != 1)
# or answers with an unexpected shape, plus everything _steam_get raises.
def resolve_vanity_url(webkey: str, vanity_url: str, timeout: Timeout = (None, None)) -> str:
    body = _steam_get(
        "ISteamUser/ResolveVanityURL/v1/",
        {"key": webkey, "vanityurl": vanity_url, "format": "json"},
        timeout
    )

    response = body.get("response") if isinstance(body, dict) else None
    if not isinstance(response, dict):
        raise SteamBadVanityUrlException(vanity_url, "malformed response")
    if response.get("success") != 1 or not response.get("steamid"):
        raise SteamBadVanityUrlException(vanity_url, response.get("message"))

    return str(response["steamid"])

# bool is an int subclass, but never a valid appid
def _is_appid(appid: Any) -> bool:
    return isinstance(appid, int) and not isinstance(appid, bool)

# Fetch the games a user owns, with app info (name, icon, playtime)
#
# Returns: List of game dicts exactly as Steam sent them, each with an
# integer "appid". Private or empty profiles come back as an empty list,
# since Steam answers those with an empty "response" object.
# Raises SteamUserCouldntGetGamesException on a malformed body, plus
# everything _steam_get raises.
def get_owned_steam_games(webkey: str, steamid: str, include_free_games: bool = False, timeout: Timeout = (None, None)) -> List[Dict[str, Any]]:
    body = _steam_get(
        "IPlayerService/GetOwnedGames/v1/",
        {
            "key": webkey,
            "steamid": steamid,
            "include_appinfo": 1,
            "include_played_free_games": int(include_free_games),
            "format": "json"
        },
        timeout
    )

    response = body.get("response") if isinstance(body, dict) else None
    if not isinstance(response, dict):
        raise SteamUserCouldntGetGamesException(steamid, "malformed response")

    games = response.get("games", [])
    if not isinstance(games, list):
        raise SteamUserCouldntGetGamesException(steamid, "\"games\" is not a list")
    if not all(isinstance(game, dict) and _is_appid(game.get("appid")) for game in games):
        raise SteamUserCouldntGetGamesException(steamid, "game entry without an integer appid")
    return games

class Resolved(NamedTuple):
    identifier: str
    steam_id: str

# Lookup failed; the identifier is passed downstream as-is, on the
# assumption it was already a Steam ID
class Unresolved(NamedTuple):
    identifier: str
    reason: str

    @property
    def steam_id(self) -> str:
        return self.identifier

Resolution = Union[Resolved, Unresolved]

class Fetched(NamedTuple):
    steam_id: str
    games: List[Dict[str, Any]]

class FetchFailed(NamedTuple):
    steam_id: str
    reason: str

    @property
    def games(self) -> List[Dict[str, Any]]:
        return []

LibraryFetch = Union[Fetched, FetchFailed]

_resolve_errors = (requests.RequestException, SteamAPIException, SteamBadVanityUrlException, ValueError)
_fetch_errors = (requests.RequestException, SteamAPIException, SteamUserCouldntGetGamesException, ValueError)

def resolve_steam_id(config: Config, identifier: str) -> Resolution:
    try:
        return Resolved(identifier, resolve_vanity_url(config.steam_key, identifier, config.timeout))
    except _resolve_errors as e:
        logger.warning("Error resolving Steam ID from vanity URL %s: %s", identifier, e)
        return Unresolved(identifier, str(e))

def fetch_library(config: Config, steam_id: str) -> LibraryFetch:
    try:
        games = get_owned_steam_games(config.steam_key, steam_id, config.include_free_games, config.timeout)
        return Fetched(steam_id, games)
    except _fetch_errors as e:
        logger.warning("Error fetching games for Steam ID %s: %s", steam_id, e)
        return FetchFailed(steam_id, str(e))
