import polars as pl
import pytest

from dynasty_records.stats import passing


def _sample_passing() -> pl.DataFrame:
    return pl.DataFrame(
        {
            "pid": ["qb1", "qb2", "qb3"],
            "completions": [20.0, 0.0, 30.0],
            "attempts": [30.0, 0.0, 30.0],
            "yards": [300.0, 0.0, 600.0],
            "touchdowns": [3.0, 0.0, 10.0],
            "interceptions": [1.0, 0.0, 0.0],
            "games_played": [2, 0, 1],
        }
    )


def test_passer_rating_matches_reference_line():
    result = passing.calculate_passer_rating(_sample_passing())
    row = result.row(0, named=True)
    assert row["rating"] == pytest.approx(127.78, abs=0.01)


def test_passer_rating_caps_each_component():
    result = passing.calculate_passer_rating(_sample_passing())
    assert result.row(2, named=True)["rating"] == pytest.approx(158.33, abs=0.01)


def test_zero_attempts_produce_zero_not_nan():
    df = _sample_passing()
    for func in (
        passing.calculate_completion_percentage,
        passing.calculate_yards_per_attempt,
        passing.calculate_adjusted_yards_per_attempt,
        passing.calculate_passer_rating,
        passing.calculate_yards_per_game,
        passing.calculate_touchdown_and_interception_rates,
    ):
        df = func(df)

    row = df.row(1, named=True)
    for column in ("comp_pct", "ypa", "aypa", "rating", "ypg", "td_pct", "int_pct"):
        assert row[column] == 0.0


def test_rate_columns():
    df = passing.calculate_completion_percentage(_sample_passing())
    df = passing.calculate_yards_per_attempt(df)
    df = passing.calculate_adjusted_yards_per_attempt(df)
    df = passing.calculate_yards_per_game(df)
    df = passing.calculate_touchdown_and_interception_rates(df)
    row = df.row(0, named=True)

    assert row["comp_pct"] == pytest.approx(66.667, abs=0.001)
    assert row["ypa"] == pytest.approx(10.0)
    assert row["aypa"] == pytest.approx(10.5)
    assert row["ypg"] == pytest.approx(150.0)
    assert row["td_pct"] == pytest.approx(10.0)
    assert row["int_pct"] == pytest.approx(3.333, abs=0.001)
