import logging
import sys

from librarymatch.config import Config
from librarymatch.comparison import intersect_owned_games

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    config = Config.from_env()

    user_inputs = sys.argv[1:] # Steam IDs or vanity names, 2 to 5 of them

    shared_games = intersect_owned_games(config, user_inputs)

    print("Games shared by all users:")
    for game in shared_games:
        print(game.get("name", "!!MISSING NAME!!")
        + " (appid: {})".format(game["appid"]))
