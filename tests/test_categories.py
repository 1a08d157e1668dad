import pytest

from dynasty_records.core.categories import (
    CATEGORY_ORDER,
    UnknownCategoryError,
    category_for_document_key,
    empty_totals,
    fields_for,
    fold_fields,
    get_schema,
    translate_box_score,
    translate_manual,
)


def test_long_fields_use_max_rule():
    assert fields_for("passing").max_fields == ("long",)
    assert "completions" in fields_for("passing").sum_fields
    assert fields_for("defense").max_fields == ("int_long",)
    assert fields_for("kicking").max_fields == ("fg_long",)
    assert fields_for("blocking").max_fields == ()


def test_fold_fields_sums_counts_and_keeps_longest_play():
    totals = empty_totals("rushing")
    fold_fields(totals, {"carries": 12, "yards": 80, "touchdowns": 1, "long": 40}, "rushing")
    fold_fields(totals, {"carries": 18, "yards": 95, "touchdowns": 0, "long": 25}, "rushing")

    assert totals["carries"] == 30
    assert totals["yards"] == 175
    assert totals["touchdowns"] == 1
    assert totals["long"] == 40


def test_translate_box_score_reads_sheet_keys():
    line = translate_box_score("kick_return", {"playerName": "A", "kR": 3, "yards": 75, "tD": 1, "long": 40})
    assert line == {"returns": 3.0, "yards": 75.0, "touchdowns": 1.0, "long": 40.0}


def test_translate_manual_coerces_malformed_values_to_zero():
    line = translate_manual("passing", {"cmp": "12", "att": 20, "yds": "1,200", "td": "n/a", "lng": None})

    assert line["completions"] == 12.0
    assert line["attempts"] == 20.0
    assert line["yards"] == 1200.0
    assert line["touchdowns"] == 0.0
    assert line["long"] == 0.0
    assert line["interceptions"] == 0.0


def test_fields_without_manual_key_are_zero_for_manual_blocks():
    line = translate_manual("defense", {"soloTkl": 5, "iNTLong": 80})
    assert line["solo_tackles"] == 5.0
    assert line["int_long"] == 0.0


def test_document_keys_map_to_registry_names():
    assert category_for_document_key("puntReturn") == "punt_return"
    assert category_for_document_key("kickReturn") == "kick_return"
    assert category_for_document_key("passing") == "passing"
    assert category_for_document_key("gamesPlayed") is None


def test_registry_order_and_unknown_category():
    assert CATEGORY_ORDER[0] == "passing"
    assert set(CATEGORY_ORDER) >= {"rushing", "receiving", "defense", "kicking", "punting"}
    assert get_schema("punt_return").document_key == "puntReturn"
    with pytest.raises(UnknownCategoryError):
        get_schema("fantasy")
