# read_stats_log.py
#
# Turns the append-only stats log back into:
#   - id_to_name:   game id -> most recently seen display name
#   - id_to_points: game id -> [(date, cumulative minutes), ...] in file order
import logging
from typing import Dict, Iterable, List, NamedTuple

from game_stats import date_of_epoch_milli, parse_csv_line


class Point(NamedTuple):
    date: str
    playtime_minutes: int


class ReportData(NamedTuple):
    """
    What csv_scan hands to build_daily_deltas.build.
    Plain dicts so callers can patch them before building.
    """
    id_to_name: Dict[str, str]
    id_to_points: Dict[str, List[Point]]


def csv_scan(lines: Iterable[str]) -> ReportData:
    id_to_name = {}
    id_to_points = {}

    for line_no, line in enumerate(lines, start=1):
        if line_no == 1:
            continue  # header
        if not line.strip():
            continue

        ms, stat = parse_csv_line(line, line_no)

        name = id_to_name.get(stat.id)
        if name is not None and name != stat.name:
            logging.warning("shifted name on %s from %s to %s", stat.id, name, stat.name)
        id_to_name[stat.id] = stat.name

        id_to_points.setdefault(stat.id, []).append(
            Point(date=date_of_epoch_milli(ms), playtime_minutes=stat.playtime_forever_minutes)
        )

    return ReportData(id_to_name=id_to_name, id_to_points=id_to_points)


def read_log_file(path: str) -> ReportData:
    # utf-8-sig drops the BOM the collector writes
    with open(path, newline="", encoding="utf-8-sig") as f:
        data = csv_scan(f)
    logging.info(
        "Read %d games, %d observations from %s",
        len(data.id_to_name),
        sum(len(p) for p in data.id_to_points.values()),
        path,
    )
    return data
