"""Lineup slotting utilities."""

from .slotting import RosterSplit, SlotFill, fill_slots, is_eligible, rank_by_value, split_roster

__all__ = [
    "RosterSplit",
    "SlotFill",
    "fill_slots",
    "is_eligible",
    "rank_by_value",
    "split_roster",
]
