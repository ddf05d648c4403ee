"""Lineup slot requirements derived from league roster settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping, Tuple

from tradefair.models import coerce_number


SLOT_ORDER: Tuple[str, ...] = ("C", "LW", "RW", "D", "Util", "G")

# League settings use a few labels that collapse onto the utility slot.
_SLOT_ALIASES: Mapping[str, str] = {
    "F": "Util",
    "UTIL": "Util",
}


@dataclass(frozen=True)
class SlotRequirements:
    """Ordered, read-only slot counts for a league's starting lineup."""

    counts: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        ordered = {slot: 0 for slot in SLOT_ORDER}
        for slot, count in self.counts.items():
            if slot not in ordered:
                raise KeyError(f"Unknown slot label {slot!r}")
            if count < 0:
                raise ValueError(f"slot {slot!r} count must be non-negative, got {count}")
            ordered[slot] = int(count)
        object.__setattr__(self, "counts", MappingProxyType(ordered))

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any] | None) -> "SlotRequirements":
        """Build requirements from a league settings payload.

        Entries may sit under ``roster_positions.roster_position`` or directly under
        ``roster_positions`` and may be wrapped in a ``roster_position`` key. Unknown
        labels and zero counts are ignored.
        """

        counts = {slot: 0 for slot in SLOT_ORDER}
        for entry in _iter_roster_positions(settings):
            label = str(entry.get("position") or entry.get("name") or "")
            count = int(coerce_number(entry.get("count")))
            if count <= 0:
                continue
            slot = label if label in counts else _SLOT_ALIASES.get(label)
            if slot is None:
                continue
            counts[slot] += count
        return cls(counts)

    def items(self) -> Iterator[Tuple[str, int]]:
        return iter(self.counts.items())

    def as_dict(self) -> dict[str, int]:
        return dict(self.counts)

    @property
    def total(self) -> int:
        return sum(self.counts.values())


def _iter_roster_positions(settings: Mapping[str, Any] | None) -> Iterable[Mapping[str, Any]]:
    if not isinstance(settings, Mapping):
        return []
    block = settings.get("roster_positions") or []
    if isinstance(block, Mapping):
        block = block.get("roster_position") or []
    if not isinstance(block, list):
        return []
    entries = []
    for item in block:
        if not isinstance(item, Mapping):
            continue
        inner = item.get("roster_position", item)
        if isinstance(inner, Mapping):
            entries.append(inner)
    return entries
