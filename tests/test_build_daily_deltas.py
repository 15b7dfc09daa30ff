# tests/test_build_daily_deltas.py
from build_daily_deltas import DeltaMatrix, build, build_matrix, csv_header
from read_stats_log import Point


def rows_by_date(lines):
    header = lines[0].split(",")
    out = {}
    for line in lines[1:]:
        fields = line.split(",")
        out[fields[0]] = dict(zip(header[1:], (int(v) for v in fields[1:])))
    return out


def test_single_observation_is_zero_baseline():
    lines = build({"10": "Solo"}, {"10": [Point("2024-05-01", 9999)]})
    assert lines == ['date,"[10]Solo"', "2024-05-01,0"]


def test_same_day_samples_accumulate():
    points = [Point("2024-05-01", 100), Point("2024-05-01", 140), Point("2024-05-01", 150)]
    matrix = build_matrix({"7": "G"}, {"7": points})
    assert matrix.get("2024-05-01", "7") == 50


def test_baseline_then_same_day_samples_on_later_date():
    points = [Point("2024-05-01", 80), Point("2024-05-02", 100), Point("2024-05-02", 140), Point("2024-05-02", 150)]
    matrix = build_matrix({"7": "G"}, {"7": points})
    assert matrix.get("2024-05-01", "7") == 0
    assert matrix.get("2024-05-02", "7") == 70


def test_cross_date_delta():
    matrix = build_matrix({"1": "A"}, {"1": [Point("2024-05-01", 100), Point("2024-05-02", 160)]})
    assert matrix.get("2024-05-01", "1") == 0
    assert matrix.get("2024-05-02", "1") == 60


def test_negative_delta_passes_through():
    lines = build({"1": "A"}, {"1": [Point("2024-05-01", 500), Point("2024-05-02", 300)]})
    assert lines[-1] == "2024-05-02,-200"


def test_unsorted_points_are_sorted_by_date():
    points = [Point("2024-05-03", 130), Point("2024-05-01", 100), Point("2024-05-02", 110)]
    matrix = build_matrix({"1": "A"}, {"1": points})
    assert [matrix.get(d, "1") for d in matrix.dates] == [0, 10, 20]


def test_same_date_ties_keep_log_order():
    # log order on 05-02 is 100, 120, 90: +50 +20 -30
    points = [Point("2024-05-01", 50), Point("2024-05-02", 100), Point("2024-05-02", 120), Point("2024-05-02", 90)]
    matrix = build_matrix({"1": "A"}, {"1": points})
    assert matrix.get("2024-05-02", "1") == 40

    tie_first = [Point("2024-05-02", 90), Point("2024-05-02", 120)]
    assert build_matrix({"1": "A"}, {"1": tie_first}).get("2024-05-02", "1") == 30


def test_dense_date_coverage():
    id_to_name = {"A": "Alpha", "B": "Beta"}
    id_to_points = {
        "A": [Point("2024-05-01", 10), Point("2024-05-03", 25)],
        "B": [Point("2024-05-02", 7)],
    }
    rows = rows_by_date(build(id_to_name, id_to_points))
    assert list(rows) == ["2024-05-01", "2024-05-02", "2024-05-03"]
    assert rows["2024-05-01"] == {'"[A]Alpha"': 0, '"[B]Beta"': 0}
    assert rows["2024-05-02"] == {'"[A]Alpha"': 0, '"[B]Beta"': 0}
    assert rows["2024-05-03"] == {'"[A]Alpha"': 15, '"[B]Beta"': 0}


def test_rows_strictly_ascending():
    id_to_points = {
        "1": [Point("2024-12-31", 1), Point("2024-01-02", 0)],
        "2": [Point("2024-06-15", 3), Point("2023-11-30", 1)],
    }
    lines = build({"1": "a", "2": "b"}, id_to_points)
    dates = [line.split(",")[0] for line in lines[1:]]
    assert dates == sorted(dates)
    assert len(set(dates)) == len(dates)


def test_header_starts_with_date_and_quotes_names():
    header = csv_header({"570": "Dota 2", "42": "Foo, Bar"}, ["570", "42"])
    assert header == 'date,"[570]Dota 2","[42]Foo, Bar"'
    assert build({}, {}) == ["date"]


def test_game_missing_from_registry_still_gets_a_column():
    lines = build({"1": "A"}, {"1": [Point("2024-05-01", 1)], "2": [Point("2024-05-01", 5)]})
    assert lines[0] == 'date,"[1]A","[2]"'
    assert lines[1] == "2024-05-01,0,0"


def test_delta_matrix_is_zero_filled_and_accumulates():
    m = DeltaMatrix(["2024-05-02", "2024-05-01", "2024-05-02"], ["x", "y"])
    assert m.dates == ["2024-05-01", "2024-05-02"]
    assert m.get("2024-05-01", "y") == 0
    m.add("2024-05-02", "x", 5)
    m.add("2024-05-02", "x", -2)
    assert m.get("2024-05-02", "x") == 3
    assert list(m.rows()) == [("2024-05-01", [0, 0]), ("2024-05-02", [3, 0])]
