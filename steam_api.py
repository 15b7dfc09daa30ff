# steam_api.py
import logging
import os

import requests

from game_stats import GameStat
from http_helpers import safe_get
from steam_utils import extract_games
from watch_errors import ConfigError

BASE = "https://api.steampowered.com"
RECENTLY_PLAYED = f"{BASE}/IPlayerService/GetRecentlyPlayedGames/v1/"

# the upstream SDK also reads its key from here; two sources of truth is refused
TOKEN_ENV = "STEAM_TOKEN"


class SteamClient:
    def __init__(self, api_key, steam_id, session=None, environ=None):
        environ = os.environ if environ is None else environ
        existing = environ.get(TOKEN_ENV)
        if existing:
            raise ConfigError(f"exist env {TOKEN_ENV}, unset it first")

        self.api_key = api_key
        self.steam_id = int(steam_id)
        self.session = session or requests.Session()

    def recently_played_raw(self, timeout=5):
        params = {"key": self.api_key, "steamid": self.steam_id, "format": "json"}
        logging.info("GET %s steamid=%s", RECENTLY_PLAYED, self.steam_id)
        _, data = safe_get(self.session, RECENTLY_PLAYED, params=params, timeout=timeout)
        return data


def stats_from_response(data):
    return [
        GameStat(
            id=g["id"],
            name=g["name"],
            playtime_two_weeks_minutes=g["playtime_2weeks"],
            playtime_forever_minutes=g["playtime_forever"],
        )
        for g in extract_games(data)
    ]


class ClientGuard:
    """
    Hands out at most one SteamClient. The caller owns the guard,
    so "one per process" means one per guard the entry point creates.
    """

    def __init__(self):
        self.client = None

    def create(self, api_key, steam_id, **kwargs) -> SteamClient:
        if self.client is not None:
            raise ConfigError("multiple instance not supported")
        self.client = SteamClient(api_key, steam_id, **kwargs)
        return self.client
