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
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Sequence

from .config import Config
from .steam_utils import FetchFailed, LibraryFetch, Resolution, Unresolved, fetch_library, resolve_steam_id

logger = logging.getLogger(__name__)

MIN_USERS = 2
MAX_USERS = 5

# Games from the first library whose appid shows up in every other library.
# Records and order come from the first library; duplicates are kept.
def compare_libraries(libraries: Sequence[Sequence[Dict[str, Any]]]) -> List[Dict[str, Any]]:
    if not libraries:
        return []

    first, rest = libraries[0], libraries[1:]
    owned_sets = [set(game["appid"] for game in library) for library in rest]

    return [
        game for game in first
        if all(game["appid"] in owned for owned in owned_sets)
    ]

# Runs the full pipeline for one request: resolve every identifier, then
# fetch every library, then intersect. Each phase fans out over a thread
# pool and waits for all of its calls before the next one starts. Results
# keep the order of user_inputs regardless of completion order.
def intersect_owned_games(config: Config, user_inputs: Sequence[str]) -> List[Dict[str, Any]]:
    with ThreadPoolExecutor(max_workers=max(len(user_inputs), 1)) as executor:
        resolutions: List[Resolution] = list(executor.map(
            lambda identifier: resolve_steam_id(config, identifier),
            user_inputs
        ))
        fetches: List[LibraryFetch] = list(executor.map(
            lambda resolution: fetch_library(config, resolution.steam_id),
            resolutions
        ))

    common_games = compare_libraries([fetch.games for fetch in fetches])
    logger.info(
        "Intersection of %d users resulted in %d games (%d unresolved, %d failed fetches)",
        len(user_inputs),
        len(common_games),
        sum(1 for resolution in resolutions if isinstance(resolution, Unresolved)),
        sum(1 for fetch in fetches if isinstance(fetch, FetchFailed)),
    )
    return common_games
