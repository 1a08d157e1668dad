import json

import pytest

from dynasty_records.data.dynasty_file import DynastyFileError, load_dynasty


def test_load_unwraps_dynasty_key(tmp_path):
    path = tmp_path / "dynasty.json"
    path.write_text(
        json.dumps({"dynasty": {"teamAbbr": "TEX", "players": [{"pid": "p1", "name": "A"}], "games": []}}),
        encoding="utf-8",
    )

    document = load_dynasty(path)
    assert document.team_abbr == "TEX"
    assert [player.pid for player in document.roster] == ["p1"]


def test_load_errors(tmp_path):
    with pytest.raises(DynastyFileError):
        load_dynasty(tmp_path / "missing.json")

    broken = tmp_path / "broken.json"
    broken.write_text("{", encoding="utf-8")
    with pytest.raises(DynastyFileError):
        load_dynasty(broken)

    listing = tmp_path / "list.json"
    listing.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(DynastyFileError):
        load_dynasty(listing)
