"""
Tests for librarymatch.config.Config loading.
"""

from __future__ import annotations

import json

import pytest

from librarymatch.config import DEFAULT_CONNECT_TIMEOUT, DEFAULT_PORT, DEFAULT_READ_TIMEOUT, Config
from librarymatch.exceptions import ConfigError


def test_from_env_defaults():
    config = Config.from_env({"STEAM_API_KEY": "abc"})

    assert config.steam_key == "abc"
    assert config.port == DEFAULT_PORT
    assert config.debug is False
    assert config.timeout == (DEFAULT_CONNECT_TIMEOUT, DEFAULT_READ_TIMEOUT)
    assert config.include_free_games is False


def test_from_env_all_settings():
    config = Config.from_env({
        "STEAM_API_KEY": " abc ",
        "PORT": "8080",
        "DEBUG": "true",
        "CONNECT_TIMEOUT": "2.5",
        "READ_TIMEOUT": "0",
        "INCLUDE_FREE_GAMES": "1",
    })

    assert config.steam_key == "abc"
    assert config.port == 8080
    assert config.debug is True
    assert config.timeout == (2.5, None)
    assert config.include_free_games is True


@pytest.mark.parametrize("environ", [{}, {"STEAM_API_KEY": ""}, {"STEAM_API_KEY": "  "}])
def test_missing_key(environ):
    with pytest.raises(ConfigError) as excinfo:
        Config.from_env(environ)
    assert excinfo.value.key == "steam-key"


@pytest.mark.parametrize("name,key", [
    ("PORT", "port"),
    ("CONNECT_TIMEOUT", "connect-timeout"),
    ("DEBUG", "debug"),
])
def test_bad_values(name, key):
    with pytest.raises(ConfigError) as excinfo:
        Config.from_env({"STEAM_API_KEY": "abc", name: "lots"})
    assert excinfo.value.key == key


def test_from_env_reads_dotenv(tmp_path, monkeypatch):
    # setenv first so the values load_dotenv writes are rolled back afterwards
    for name in ("STEAM_API_KEY", "PORT"):
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    dotenv_file = tmp_path / ".env"
    dotenv_file.write_text("STEAM_API_KEY=fromdotenv\nPORT=4000\n")

    config = Config.from_env(dotenv_path=str(dotenv_file))

    assert config.steam_key == "fromdotenv"
    assert config.port == 4000


def test_from_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "steam-key": "jsonkey",
        "DEBUG": True,
        "connect-timeout": 0.0,
        "read-timeout": 3,
        "include-free-games": False,
    }))

    config = Config.from_json(str(path))

    assert config.steam_key == "jsonkey"
    assert config.debug is True
    assert config.timeout == (None, 3.0)
    assert config.port == DEFAULT_PORT


def test_from_json_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        Config.from_json(str(tmp_path / "nope.json"))


def test_repr_hides_key():
    assert "secretkey" not in repr(Config(steam_key="secretkey"))
