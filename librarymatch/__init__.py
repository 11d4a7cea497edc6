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

from flask import Flask, jsonify, render_template, request

from .comparison import MAX_USERS, MIN_USERS, intersect_owned_games
from .config import Config

logger = logging.getLogger(__name__)

BAD_COUNT_MESSAGE = "Invalid number of user inputs provided. Must be between {} and {}.".format(MIN_USERS, MAX_USERS)
BAD_INPUT_MESSAGE = "Invalid user inputs provided. Each must be a non-empty string."
SERVER_ERROR_MESSAGE = "An error occurred while comparing libraries."

def create_app(config: Config = None):
    if config is None:
        config = Config.from_env()

    app = Flask(__name__)
    app.debug = config.debug
    app.json.sort_keys = False
    app.config["LIBRARYMATCH"] = config

    logger.info("Steam requests time out after %s", config.timeout)

    # Pull userInputs out of a JSON body, falling back to form fields
    #
    # Returns: the raw value, or None if the request carried none
    def read_user_inputs():
        if request.mimetype in ("application/x-www-form-urlencoded", "multipart/form-data"):
            return request.form.getlist("userInputs") or request.form.getlist("userInputs[]") or None
        body = request.get_json(force=True, silent=True)
        if isinstance(body, dict):
            return body.get("userInputs")
        return None

    @app.route("/")
    def index():
        return render_template("form.html", min_users=MIN_USERS, max_users=MAX_USERS)

    @app.route("/compare-libraries", methods=["POST"])
    def compare_libraries_route():
        user_inputs = read_user_inputs()

        if not isinstance(user_inputs, list) or not (MIN_USERS <= len(user_inputs) <= MAX_USERS):
            return jsonify({"error": BAD_COUNT_MESSAGE}), 400

        if not all(isinstance(user_input, str) and user_input.strip() for user_input in user_inputs):
            return jsonify({"error": BAD_INPUT_MESSAGE}), 400

        try:
            common_games = intersect_owned_games(config, [user_input.strip() for user_input in user_inputs])
            return jsonify({"commonGames": common_games})
        except Exception:
            app.logger.exception("Error comparing libraries")
            return jsonify({"error": SERVER_ERROR_MESSAGE}), 500

    return app
