import polars as pl
import pytest

from dynasty_records.stats import combined, defense, receiving, rushing, specialteams


def test_field_goal_percentage():
    df = pl.DataFrame({"fg_made": [9.0, 0.0], "fg_attempts": [11.0, 0.0]})
    result = specialteams.calculate_field_goal_percentage(df)
    assert result["fg_pct"].to_list()[0] == pytest.approx(81.818, abs=0.001)
    assert result["fg_pct"].to_list()[1] == 0.0


def test_punt_and_return_averages():
    punts = specialteams.calculate_punt_average(pl.DataFrame({"yards": [450.0], "punts": [10.0]}))
    returns = specialteams.calculate_return_average(pl.DataFrame({"yards": [250.0], "returns": [10.0]}))
    assert punts.row(0, named=True)["ypp"] == pytest.approx(45.0)
    assert returns.row(0, named=True)["avg"] == pytest.approx(25.0)


def test_rushing_receiving_and_defense_metrics():
    rush = rushing.calculate_yards_per_carry(pl.DataFrame({"yards": [600.0], "carries": [100.0]}))
    rec = receiving.calculate_yards_per_reception(pl.DataFrame({"yards": [350.0], "receptions": [20.0]}))
    tackles = defense.calculate_total_tackles(
        pl.DataFrame({"solo_tackles": [40.0], "assisted_tackles": [25.0]})
    )
    assert rush.row(0, named=True)["ypc"] == pytest.approx(6.0)
    assert rec.row(0, named=True)["ypr"] == pytest.approx(17.5)
    assert tackles.row(0, named=True)["total_tackles"] == 65.0


def _frame(pids, years, count_column, counts, yards, tds) -> pl.DataFrame:
    return pl.DataFrame(
        {
            "pid": pids,
            "year": years,
            count_column: counts,
            "yards": yards,
            "touchdowns": tds,
        }
    )


def test_scrimmage_adds_rushing_and_receiving():
    rush = _frame(["a"], [2024], "carries", [100.0], [600.0], [5.0])
    rec = _frame(["a", "b"], [2024, 2024], "receptions", [20.0, 0.0], [350.0, 0.0], [2.0, 0.0])

    result = combined.build_scrimmage_frame(rush, rec)
    row = result.filter(pl.col("pid") == "a").row(0, named=True)
    assert row["plays"] == 120
    assert row["yards"] == 950
    assert row["tds"] == 7

    active = combined.drop_inactive_rows(result)
    assert active["pid"].to_list() == ["a"]


def test_all_purpose_includes_returns_and_yards_per_play():
    rush = _frame(["a"], [2024], "carries", [10.0], [50.0], [0.0])
    rec = _frame(["a"], [2024], "receptions", [5.0], [50.0], [1.0])
    kr = _frame(["a"], [2024], "returns", [4.0], [100.0], [0.0])
    pr = _frame(["a", "c"], [2024, 2025], "returns", [1.0, 2.0], [0.0, 30.0], [0.0, 1.0])

    result = combined.calculate_yards_per_play(combined.build_all_purpose_frame(rush, rec, kr, pr))
    assert result.select("pid", "year").rows() == [("a", 2024), ("c", 2025)]
    row = result.row(0, named=True)
    assert row["plays"] == 20
    assert row["yards"] == 200
    assert row["ypp"] == pytest.approx(10.0)
