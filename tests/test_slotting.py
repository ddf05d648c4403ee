from collections import Counter

from tradefair.config import SlotRequirements
from tradefair.lineup import fill_slots, is_eligible, rank_by_value, split_roster
from tradefair.models import Player


def _player(key: str, positions: list[str], value: float) -> Player:
    return Player(player_key=key, name=key, positions=positions, value=value)


def _sample_roster() -> list[Player]:
    return [
        _player("d1", ["D"], 0.1),
        _player("g2", ["G"], 0.2),
        _player("c2", ["C"], 2.0),
        _player("lw1", ["LW"], 1.0),
        _player("c1", ["C"], 3.0),
        _player("g1", ["G"], 0.5),
    ]


REQUIREMENTS = SlotRequirements({"C": 1, "LW": 1, "Util": 1, "G": 1})


def test_is_eligible_rules():
    skater = _player("s", ["C", "LW"], 0.0)
    goalie = _player("g", ["G"], 0.0)

    assert is_eligible(skater, "C")
    assert is_eligible(skater, "Util")
    assert not is_eligible(skater, "D")
    assert not is_eligible(skater, "G")
    assert is_eligible(goalie, "G")
    assert not is_eligible(goalie, "Util")


def test_split_roster_fills_slots_greedily():
    split = split_roster(_sample_roster(), REQUIREMENTS)

    assert [p.player_key for p in split.starters] == ["c1", "c2", "lw1", "g1"]
    assert [p.player_key for p in split.bench] == ["g2", "d1"]
    assert split.starter_value == 3.0 + 2.0 + 1.0 + 0.5


def test_split_roster_partitions_every_player_once():
    roster = _sample_roster()
    split = split_roster(roster, REQUIREMENTS)

    starter_keys = {p.player_key for p in split.starters}
    bench_keys = {p.player_key for p in split.bench}
    assert starter_keys.isdisjoint(bench_keys)
    assert starter_keys | bench_keys == {p.player_key for p in roster}
    assert len(split.starters) + len(split.bench) == len(roster)


def test_fill_slots_respects_slot_counts():
    many_centers = [_player(f"c{i}", ["C"], float(10 - i)) for i in range(6)]
    requirements = SlotRequirements({"C": 2, "Util": 1})

    fill = fill_slots(rank_by_value(many_centers), requirements)

    assert len(fill.chosen) == requirements.total
    assert dict(fill.remaining) == {"C": 0, "LW": 0, "RW": 0, "D": 0, "Util": 0, "G": 0}
    assert [p.player_key for p in fill.unplaced] == ["c3", "c4", "c5"]
    assert fill.open_slots == 0


def test_fill_slots_reports_open_slots_and_is_pure():
    requirements = SlotRequirements({"C": 1, "D": 2})
    fill = fill_slots([_player("d1", ["D"], 1.0)], requirements)

    assert fill.remaining["C"] == 1
    assert fill.remaining["D"] == 1
    assert fill.open_slots == 2
    assert requirements.as_dict()["D"] == 2


def test_fill_slots_accepts_plain_mapping():
    fill = fill_slots([_player("g1", ["G"], 1.0)], {"G": 1, "Util": 1})

    assert [p.player_key for p in fill.chosen] == ["g1"]
    assert fill.remaining == {"G": 0, "Util": 1}


def test_rank_by_value_keeps_tie_order():
    tied = [_player("first", ["C"], 1.0), _player("second", ["C"], 1.0), _player("top", ["C"], 2.0)]

    ranked = rank_by_value(tied)

    assert [p.player_key for p in ranked] == ["top", "first", "second"]


def test_goalie_without_open_slot_goes_to_bench():
    goalies = [_player("g1", ["G"], 1.0), _player("g2", ["G"], 0.5)]

    split = split_roster(goalies, SlotRequirements({"G": 1, "Util": 2}))

    assert [p.player_key for p in split.starters] == ["g1"]
    assert [p.player_key for p in split.bench] == ["g2"]


def test_greedy_pass_can_strand_a_less_flexible_player():
    # The dual-eligible player takes the first open slot (C), so the C-only player
    # is benched while LW stays open.
    flexible = _player("flex", ["C", "LW"], 5.0)
    center = _player("center", ["C"], 4.0)

    fill = fill_slots(rank_by_value([center, flexible]), SlotRequirements({"C": 1, "LW": 1}))

    assert [p.player_key for p in fill.chosen] == ["flex"]
    assert [p.player_key for p in fill.unplaced] == ["center"]
    assert fill.remaining["LW"] == 1


def test_no_slot_receives_more_than_its_count():
    roster = _sample_roster() + [_player("lw2", ["LW"], 2.5), _player("c3", ["C", "LW"], 2.2)]
    fill = fill_slots(rank_by_value(roster), REQUIREMENTS)

    placed = Counter()
    need = REQUIREMENTS.as_dict()
    for player in fill.chosen:
        slot = next(s for s, c in need.items() if c > 0 and is_eligible(player, s))
        need[slot] -= 1
        placed[slot] += 1
    for slot, count in placed.items():
        assert count <= REQUIREMENTS.counts[slot]
