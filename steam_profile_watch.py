#!/usr/bin/env python3
"""
Watch a Steam profile's recently played games.

  --mode collect   fetch GetRecentlyPlayedGames once and append to the stats log
  --mode report    turn the stats log into report.csv (minutes played per day, per game)

Run collect from cron (or Task Scheduler) a few times a day, report whenever.
"""
import argparse
import logging
import os
import sys

from build_daily_deltas import build
from fetch_recent_games import collect
from read_stats_log import read_log_file
from safe_io import default_log_path, default_report_path, write_report
from steam_api import ClientGuard
from watch_errors import WatchError

DEFAULT_STEAM_KEY = "TOP_SECRET"
DEFAULT_STEAM_ID = 11223344556677880


def parse_args(argv=None):
    p = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    p.add_argument(
        "--steam-key",
        default=os.environ.get("STEAM_KEY", DEFAULT_STEAM_KEY),
        help="Steam API key from https://steamcommunity.com/dev/apikey (env STEAM_KEY)",
    )
    p.add_argument(
        "--steam-id",
        type=int,
        default=os.environ.get("STEAM_ID", DEFAULT_STEAM_ID),
        help="Steam account id from your profile page (env STEAM_ID)",
    )
    p.add_argument("--mode", choices=["report", "collect"], default="report")
    p.add_argument("--log-file", default=None, help="stats log (default: steam_profile_watch.csv next to this program)")
    p.add_argument("--report-file", default=None, help="report output (default: report.csv next to this program)")
    p.add_argument("--timeout", type=float, default=5.0, help="seconds to wait for Steam")
    p.add_argument("--verbose", action="store_true")
    return p.parse_args(argv)


def run_report(log_path, report_path):
    data = read_log_file(log_path)
    lines = build(data.id_to_name, data.id_to_points)
    n = write_report(report_path, lines)
    logging.info("Wrote %d rows to %s", n - 1, report_path)
    return n


def run_collect(args, log_path, guard=None):
    guard = guard or ClientGuard()
    client = guard.create(args.steam_key, args.steam_id)
    return collect(client, log_path, timeout=args.timeout)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
    )

    log_path = args.log_file or default_log_path()
    try:
        if args.mode == "report":
            run_report(log_path, args.report_file or default_report_path())
        else:
            run_collect(args, log_path)
    except (WatchError, OSError) as e:
        logging.error("%s failed: %s", args.mode, e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
