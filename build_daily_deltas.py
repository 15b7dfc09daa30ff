# build_daily_deltas.py
#
# Log observations are cumulative playtime. The report wants minutes played
# per day, per game:
#   - first observation of a game -> 0 on its date (nothing to diff against)
#   - every later observation      -> minutes minus previous observation,
#                                     added into (its date, game)
# Several collector runs on one day therefore sum, and a run after a long
# gap books the whole gap on the day it ran.
from typing import Dict, Iterable, List

import pandas as pd

OBS_COLUMNS = ["game_id", "seq", "date", "minutes"]


class DeltaMatrix:
    """
    date x game id grid of delta minutes, zero-filled up front so every
    known game has a cell on every known date. Writes accumulate.
    """

    def __init__(self, dates: Iterable[str], game_ids: Iterable[str]):
        self.frame = pd.DataFrame(
            0,
            index=pd.Index(sorted(set(dates)), name="date"),
            columns=list(game_ids),
            dtype="int64",
        )

    def add(self, date: str, game_id: str, delta: int):
        self.frame.at[date, game_id] += int(delta)

    def get(self, date: str, game_id: str) -> int:
        return int(self.frame.at[date, game_id])

    @property
    def dates(self) -> List[str]:
        return list(self.frame.index)

    @property
    def game_ids(self) -> List[str]:
        return list(self.frame.columns)

    def rows(self):
        for date, values in self.frame.iterrows():
            yield date, [int(v) for v in values]


def observations_frame(id_to_points) -> pd.DataFrame:
    rows = []
    for game_id, points in id_to_points.items():
        for seq, (date, minutes) in enumerate(points):
            rows.append({"game_id": game_id, "seq": seq, "date": date, "minutes": int(minutes)})
    return pd.DataFrame(rows, columns=OBS_COLUMNS)


def with_deltas(obs: pd.DataFrame) -> pd.DataFrame:
    """
    Sort each game's observations by date, ties kept in log order via seq,
    and diff neighbours. Negative deltas (counter resets) pass through.
    """
    obs = obs.sort_values(["game_id", "date", "seq"], ignore_index=True)
    if obs.empty:
        obs["delta"] = pd.Series(dtype="int64")
        return obs
    obs["delta"] = (
        obs.groupby("game_id", sort=False)["minutes"]
        .diff()
        .fillna(0)
        .astype("int64")
    )
    return obs


def report_columns(id_to_name: Dict[str, str], id_to_points) -> List[str]:
    columns = list(id_to_name)
    columns.extend(gid for gid in id_to_points if gid not in id_to_name)
    return columns


def build_matrix(id_to_name: Dict[str, str], id_to_points) -> DeltaMatrix:
    obs = with_deltas(observations_frame(id_to_points))
    matrix = DeltaMatrix(obs["date"], report_columns(id_to_name, id_to_points))
    for row in obs.itertuples(index=False):
        matrix.add(row.date, row.game_id, row.delta)
    return matrix


def csv_header(id_to_name: Dict[str, str], game_ids: Iterable[str]) -> str:
    fields = ["date"]
    for gid in game_ids:
        fields.append(f'"[{gid}]{id_to_name.get(gid, "")}"')  # quoted: names may hold commas
    return ",".join(fields)


def build(id_to_name: Dict[str, str], id_to_points) -> List[str]:
    """Header line followed by one line per date, ascending."""
    matrix = build_matrix(id_to_name, id_to_points)
    lines = [csv_header(id_to_name, matrix.game_ids)]
    for date, values in matrix.rows():
        lines.append(",".join([date] + [str(v) for v in values]))
    return lines
