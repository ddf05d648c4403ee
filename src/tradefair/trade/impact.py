"""Per-team lineup value change caused by a trade."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

from tradefair.config import SlotRequirements
from tradefair.lineup import RosterSplit, fill_slots, rank_by_value
from tradefair.models import Player


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TeamImpact:
    """Best post-trade lineup for one team and how it compares to the current one."""

    impact: float
    strength: float
    baseline: float
    lineup: Tuple[Player, ...]
    backfill: Tuple[Player, ...]


def team_trade_impact(
    split: RosterSplit,
    *,
    outgoing: Iterable[str],
    incoming: Sequence[Player],
    free_agents: Sequence[Player],
    requirements: SlotRequirements,
) -> TeamImpact:
    """Simulate one side of a trade.

    ``split`` is the team's pre-trade lineup; ``outgoing`` holds the keys it sends away.
    The remaining players plus ``incoming`` are re-slotted, and any slot left open is
    backfilled from ``free_agents``. The impact is the new lineup value minus the
    pre-trade starters' value.
    """

    outgoing = set(outgoing)
    remaining = split.without(outgoing)
    candidates = rank_by_value([*remaining.starters, *remaining.bench, *incoming])
    fill = fill_slots(candidates, requirements)

    backfill: Tuple[Player, ...] = ()
    if fill.open_slots:
        # A free agent never duplicates a placed, benched or just-traded player.
        taken = {player.player_key for player in (*fill.chosen, *fill.unplaced)} | outgoing
        available = [player for player in free_agents if player.player_key not in taken]
        backfill = fill_slots(rank_by_value(available), fill.remaining).chosen
        logger.debug(
            "Backfilled %d of %d open slots from %d free agents",
            len(backfill),
            fill.open_slots,
            len(available),
        )

    lineup = fill.chosen + backfill
    strength = sum(player.value for player in lineup)
    baseline = split.starter_value
    return TeamImpact(
        impact=strength - baseline,
        strength=strength,
        baseline=baseline,
        lineup=lineup,
        backfill=backfill,
    )
