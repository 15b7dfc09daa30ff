# fetch_recent_games.py
# Collector: one GetRecentlyPlayedGames call, appended to the stats log.
import logging
import os
from datetime import datetime

from dateutil.tz import tzlocal

from safe_io import append_stats, debug_dump
from steam_api import SteamClient, stats_from_response

DEBUG_DUMP_FILE = "debug_recent_games.json"


def collect(client: SteamClient, log_path: str, timeout=5, now=None) -> int:
    """Returns the number of rows appended to log_path."""
    data = client.recently_played_raw(timeout=timeout)
    if os.environ.get("DEBUG_DUMP") == "1":
        debug_dump(data, DEBUG_DUMP_FILE)

    stats = stats_from_response(data)
    logging.info("Steam returned %d recently played games", len(stats))

    if now is None:
        now = datetime.now(tzlocal())
    n = append_stats(log_path, stats, now)
    logging.info("Appended %d rows to %s", n, log_path)
    return n
