import pytest

from tradefair.valuation import extract_categories


def _settings(stats, key="stats"):
    return {"stat_categories": {key: stats}}


def test_extract_categories_unwraps_stat_descriptors():
    settings = _settings(
        [
            {"stat": {"stat_id": 1, "name": "Goals", "position_type": "P"}},
            {"stat": {"stat_id": "2", "name": "Assists", "position_type": "P"}},
            {"stat": {"stat_id": 19, "name": "Wins", "position_type": "G"}},
        ]
    )

    categories = extract_categories(settings)

    assert [c.id for c in categories] == [1, 2, 19]
    assert categories[0].name == "Goals"
    assert categories[2].position_type == "G"


def test_extract_categories_accepts_flat_stat_key():
    settings = _settings([{"stat_id": 14, "name": "Shots on Goal"}], key="stat")

    categories = extract_categories(settings)

    assert len(categories) == 1
    assert categories[0].id == 14
    assert categories[0].position_type is None


@pytest.mark.parametrize("name", ["Games Played", "GAMES PLAYED", "Goalie games played"])
def test_games_played_is_never_scored(name):
    settings = _settings(
        [
            {"stat": {"stat_id": 29, "name": name}},
            {"stat": {"stat_id": 1, "name": "Goals"}},
        ]
    )

    assert [c.id for c in extract_categories(settings)] == [1]


def test_non_numeric_and_missing_ids_are_skipped():
    settings = _settings(
        [
            {"stat": {"name": "Mystery"}},
            {"stat": {"stat_id": "abc", "name": "Letters"}},
            {"stat": {"stat_id": 1.5, "name": "Fraction"}},
            {"stat": {"stat_id": 2, "name": "Assists"}},
        ]
    )

    assert [c.id for c in extract_categories(settings)] == [2]


def test_duplicate_ids_keep_first():
    settings = _settings(
        [
            {"stat": {"stat_id": 1, "name": "Goals"}},
            {"stat": {"stat_id": 1, "name": "Goals (dup)"}},
        ]
    )

    categories = extract_categories(settings)
    assert len(categories) == 1
    assert categories[0].name == "Goals"


@pytest.mark.parametrize(
    "settings",
    [None, {}, {"stat_categories": None}, {"stat_categories": {"stats": "oops"}}, "text"],
)
def test_malformed_settings_yield_empty_list(settings):
    assert extract_categories(settings) == []
