# game_stats.py
# One row of the stats log: how a game's counters looked at one instant.
import re
from datetime import datetime
from typing import NamedTuple

from dateutil.tz import tzlocal

from watch_errors import MalformedRecord

CSV_HEADER = "EpochMilli,Date,ID,Name,PlayTimeTwoWeeksMinutes,PlayTimeForeverMinutes"
MIN_FIELDS = 6
INT_RE = re.compile(r"[+-]?[0-9]+")


class GameStat(NamedTuple):
    id: str
    name: str
    playtime_two_weeks_minutes: int
    playtime_forever_minutes: int


def epoch_milli(ts: datetime) -> int:
    return int(ts.timestamp() * 1000)


def date_of_epoch_milli(ms: int) -> str:
    """Local calendar day (YYYY-MM-DD) of an epoch-millis timestamp."""
    return datetime.fromtimestamp(ms / 1000, tz=tzlocal()).date().isoformat()


def csv_line(stat: GameStat, now: datetime) -> str:
    # name is written as-is; parse_csv_line recovers embedded commas by position
    fields = [
        str(epoch_milli(now)),
        now.date().isoformat(),
        stat.id,
        stat.name,
        str(stat.playtime_two_weeks_minutes),
        str(stat.playtime_forever_minutes),
    ]
    return ",".join(fields)


def parse_int(field: str, line_no: int, what: str) -> int:
    # ASCII digits only; int() alone also takes " 1_0 " and full-width digits
    if not INT_RE.fullmatch(field):
        raise MalformedRecord(line_no, f"parse {what}: {field!r}")
    return int(field)


def parse_csv_line(line: str, line_no: int = 0):
    """
    Returns (epoch_milli, GameStat).
    The Date column is not read back; callers derive the day from epoch_milli.
    """
    record = line.rstrip("\r\n").split(",")
    if len(record) < MIN_FIELDS:
        raise MalformedRecord(line_no, f"expected at least {MIN_FIELDS} fields, got {len(record)}")

    ms = parse_int(record[0], line_no, "timestamp")
    two_weeks = parse_int(record[-2], line_no, "PlayTimeTwoWeeksMinutes")
    forever = parse_int(record[-1], line_no, "PlayTimeForeverMinutes")

    stat = GameStat(
        id=record[2],
        name=",".join(record[3:-2]),
        playtime_two_weeks_minutes=two_weeks,
        playtime_forever_minutes=forever,
    )
    return ms, stat
