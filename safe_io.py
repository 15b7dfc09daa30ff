# safe_io.py
import json
import logging
import os
import sys
from typing import Iterable, List

from game_stats import CSV_HEADER, GameStat, csv_line

BOM = "\ufeff"
LOG_FILENAME = "steam_profile_watch.csv"
REPORT_FILENAME = "report.csv"


def data_dir() -> str:
    """
    Directory holding the stats log and the report.
    STEAM_WATCH_DIR wins; otherwise the folder of the running program,
    or the current directory when that cannot be resolved.
    """
    override = os.environ.get("STEAM_WATCH_DIR")
    if override:
        return override
    program = sys.argv[0] if sys.argv else ""
    if not program:
        return ""
    try:
        return os.path.dirname(os.path.realpath(program))
    except OSError:
        return ""


def default_log_path() -> str:
    return os.path.join(data_dir(), LOG_FILENAME)


def default_report_path() -> str:
    return os.path.join(data_dir(), REPORT_FILENAME)


def append_stats(path: str, stats: List[GameStat], now) -> int:
    """
    Append one log row per stat. A missing log is created with the
    BOM and header first. Returns the number of rows written.
    """
    write_header = not os.path.exists(path)
    # BOM is for Excel kanji display; the reader strips it with utf-8-sig
    with open(path, "a", newline="", encoding="utf-8") as f:
        if write_header:
            f.write(BOM + CSV_HEADER + "\n")
        for stat in stats:
            f.write(csv_line(stat, now) + "\n")
    return len(stats)


def write_report(path: str, lines: Iterable[str]) -> int:
    """Overwrite path with BOM + lines. Returns the number of lines written."""
    n = 0
    with open(path, "w", newline="", encoding="utf-8") as f:
        f.write(BOM)
        for line in lines:
            f.write(line + "\n")
            n += 1
    return n


def debug_dump(obj, fname: str):
    # Dump compact JSON for inspection when DEBUG_DUMP=1
    try:
        with open(fname, "w", encoding="utf-8") as f:
            json.dump(obj, f, indent=2, ensure_ascii=False)
    except OSError as e:
        logging.warning("debug dump to %s failed: %s", fname, e)
