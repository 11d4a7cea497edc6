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

class ConfigError(Exception):
    key = None

    def __init__(self, key: str, message: str):
        self.key = key
        self.message = message

    def __str__(self):
        return "ConfigError, The setting \"{}\" is invalid: {}".format(self.key, self.message)

class SteamUserException(Exception):
    steam_id = None

    def __init__(self, steam_id: str, reason: str = None):
        self.steam_id = steam_id
        self.reason = reason

    def __str__(self):
        if self.reason:
            return "SteamUserException, An exception occurred with the Steam ID {}: {}".format(self.steam_id, self.reason)
        else:
            return "SteamUserException, An exception occurred with the Steam ID {}".format(self.steam_id)

class SteamUserCouldntGetGamesException(SteamUserException):
    def __str__(self):
        if self.reason:
            return "SteamUserCouldntGetGamesException, The owned games of the Steam ID {} couldn't be retrieved: {}".format(self.steam_id, self.reason)
        else:
            return "SteamUserCouldntGetGamesException, The owned games of the Steam ID {} couldn't be retrieved".format(self.steam_id)

class SteamBadVanityUrlException(Exception):
    vanity_url = None

    def __init__(self, vanity_url: str, message: str = None):
        self.vanity_url = vanity_url
        self.message = message

    def __str__(self):
        if self.message:
            return "SteamBadVanityUrlException, The vanity url \"{}\" could not be resolved: {}".format(self.vanity_url, self.message)
        return "SteamBadVanityUrlException, The vanity url \"{}\" is not associated with a Steam user".format(self.vanity_url)

class SteamAPIException(Exception):
    error_code = None

    def __init__(self, error_code: int):
        self.error_code = error_code

    def __str__(self):
        return "SteamAPIException, The Steam API returned the error code {}".format(self.error_code)
