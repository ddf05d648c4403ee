"""Greedy lineup slotting shared by roster splits and trade simulation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Mapping, Tuple

from tradefair.config import SlotRequirements
from tradefair.models import Player


@dataclass(frozen=True)
class SlotFill:
    """Outcome of a single greedy pass over a candidate sequence."""

    chosen: Tuple[Player, ...]
    remaining: Mapping[str, int]
    unplaced: Tuple[Player, ...]

    @property
    def open_slots(self) -> int:
        return sum(count for count in self.remaining.values() if count > 0)


@dataclass(frozen=True)
class RosterSplit:
    """A team's players partitioned into a starting lineup and a bench."""

    starters: Tuple[Player, ...]
    bench: Tuple[Player, ...]

    @property
    def starter_value(self) -> float:
        return sum(player.value for player in self.starters)

    def without(self, player_keys: Iterable[str]) -> "RosterSplit":
        keys = set(player_keys)
        return RosterSplit(
            starters=tuple(p for p in self.starters if p.player_key not in keys),
            bench=tuple(p for p in self.bench if p.player_key not in keys),
        )


def is_eligible(player: Player, slot: str) -> bool:
    if slot == "Util":
        return not player.is_goalie
    if slot == "G":
        return player.is_goalie
    return slot in player.positions


def rank_by_value(players: Iterable[Player]) -> List[Player]:
    """Sort descending by value; ties keep their incoming order."""

    return sorted(players, key=lambda player: player.value, reverse=True)


def fill_slots(
    candidates: Iterable[Player],
    requirements: SlotRequirements | Mapping[str, int],
) -> SlotFill:
    """Place each candidate, in the given order, into its first open eligible slot.

    Slots are scanned in declaration order. This is a single greedy pass, not an
    optimal assignment: a flexible player can take a slot that a less flexible one
    needed later.
    """

    counts = requirements.counts if isinstance(requirements, SlotRequirements) else requirements
    need = dict(counts)
    chosen: List[Player] = []
    unplaced: List[Player] = []
    for player in candidates:
        for slot, count in need.items():
            if count > 0 and is_eligible(player, slot):
                need[slot] = count - 1
                chosen.append(player)
                break
        else:
            unplaced.append(player)
    return SlotFill(chosen=tuple(chosen), remaining=need, unplaced=tuple(unplaced))


def split_roster(players: Iterable[Player], requirements: SlotRequirements) -> RosterSplit:
    fill = fill_slots(rank_by_value(players), requirements)
    return RosterSplit(starters=fill.chosen, bench=fill.unplaced)
