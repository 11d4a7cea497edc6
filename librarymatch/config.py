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

import json
import os
from typing import Any, Callable, Mapping, NamedTuple, Optional

from dotenv import load_dotenv

from .exceptions import ConfigError

DEFAULT_PORT = 3000
DEFAULT_CONNECT_TIMEOUT = 5.0
DEFAULT_READ_TIMEOUT = 10.0

# Settings for one running instance. Built once at startup and handed to
# the resolver and fetcher, never read from the environment afterwards.
class Config(NamedTuple):
    steam_key: str
    port: int = DEFAULT_PORT
    debug: bool = False
    connect_timeout: Optional[float] = DEFAULT_CONNECT_TIMEOUT
    read_timeout: Optional[float] = DEFAULT_READ_TIMEOUT
    include_free_games: bool = False

    @property
    def timeout(self):
        return (self.connect_timeout, self.read_timeout)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = None, dotenv_path: str = None) -> "Config":
        if environ is None:
            load_dotenv(dotenv_path)
            environ = os.environ

        return cls.from_mapping({
            "steam-key": environ.get("STEAM_API_KEY"),
            "port": environ.get("PORT"),
            "debug": environ.get("DEBUG"),
            "connect-timeout": environ.get("CONNECT_TIMEOUT"),
            "read-timeout": environ.get("READ_TIMEOUT"),
            "include-free-games": environ.get("INCLUDE_FREE_GAMES"),
        })

    @classmethod
    def from_json(cls, path: str) -> "Config":
        try:
            with open(path, "r") as config_file:
                config = json.load(config_file)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(path, str(e))

        if not isinstance(config, dict):
            raise ConfigError(path, "expected a JSON object")

        return cls.from_mapping({
            "steam-key": config.get("steam-key"),
            "port": config.get("port"),
            "debug": config.get("debug", config.get("DEBUG")),
            "connect-timeout": config.get("connect-timeout"),
            "read-timeout": config.get("read-timeout"),
            "include-free-games": config.get("include-free-games"),
        })

    # Keys follow the config.json naming. None means "not set".
    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "Config":
        steam_key = values.get("steam-key")
        if not steam_key or not str(steam_key).strip():
            raise ConfigError("steam-key", "a Steam Web API key is required")

        return cls(
            steam_key=str(steam_key).strip(),
            port=_parse("port", values.get("port"), int, DEFAULT_PORT),
            debug=_parse_bool("debug", values.get("debug")),
            connect_timeout=_parse_timeout("connect-timeout", values.get("connect-timeout"), DEFAULT_CONNECT_TIMEOUT),
            read_timeout=_parse_timeout("read-timeout", values.get("read-timeout"), DEFAULT_READ_TIMEOUT),
            include_free_games=_parse_bool("include-free-games", values.get("include-free-games")),
        )

    # Never show the key in logs or tracebacks
    def __repr__(self):
        return "Config(port={}, debug={}, connect_timeout={}, read_timeout={}, include_free_games={})".format(
            self.port, self.debug, self.connect_timeout, self.read_timeout, self.include_free_games
        )

def _parse(key: str, value: Any, convert: Callable, default: Any) -> Any:
    if value is None or value == "":
        return default
    try:
        return convert(value)
    except (TypeError, ValueError):
        raise ConfigError(key, "{!r} is not a valid value".format(value))

def _parse_bool(key: str, value: Any) -> bool:
    if value is None or value == "":
        return False
    if isinstance(value, bool):
        return value
    lowered = str(value).strip().lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    raise ConfigError(key, "{!r} is not a valid boolean".format(value))

# A timeout of 0 or less disables it, same as requests' None
def _parse_timeout(key: str, value: Any, default: float) -> Optional[float]:
    timeout = _parse(key, value, float, default)
    if timeout <= 0.0:
        return None
    return timeout
