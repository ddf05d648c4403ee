import pytest

from tradefair.config import SLOT_ORDER, SlotRequirements


def _settings(entries):
    return {"roster_positions": {"roster_position": entries}}


def test_from_settings_counts_known_slots_in_order():
    settings = _settings(
        [
            {"roster_position": {"position": "G", "count": 2}},
            {"roster_position": {"position": "C", "count": 2}},
            {"roster_position": {"position": "D", "count": "4"}},
            {"roster_position": {"position": "LW", "count": 2}},
            {"roster_position": {"position": "RW", "count": 2}},
        ]
    )

    requirements = SlotRequirements.from_settings(settings)

    assert tuple(slot for slot, _ in requirements.items()) == SLOT_ORDER
    assert requirements.as_dict() == {"C": 2, "LW": 2, "RW": 2, "D": 4, "Util": 0, "G": 2}
    assert requirements.total == 12


def test_from_settings_maps_aliases_and_ignores_bench():
    settings = {
        "roster_positions": [
            {"position": "F", "count": 1},
            {"position": "UTIL", "count": 1},
            {"position": "BN", "count": 5},
            {"position": "IR+", "count": 2},
            {"position": "C", "count": 0},
            {"position": "LW", "count": "many"},
        ]
    }

    requirements = SlotRequirements.from_settings(settings)

    assert requirements.as_dict()["Util"] == 2
    assert requirements.total == 2


@pytest.mark.parametrize("settings", [None, {}, {"roster_positions": "bad"}, [1, 2]])
def test_from_settings_tolerates_malformed_input(settings):
    assert SlotRequirements.from_settings(settings).total == 0


def test_requirements_are_read_only():
    requirements = SlotRequirements({"C": 1})
    with pytest.raises(TypeError):
        requirements.counts["C"] = 3  # type: ignore[index]


def test_unknown_slot_label_raises():
    with pytest.raises(KeyError):
        SlotRequirements({"BN": 3})


def test_negative_count_raises():
    with pytest.raises(ValueError):
        SlotRequirements({"C": -1})
