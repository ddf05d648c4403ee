"""End-to-end evaluation of a proposed two-team trade."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Sequence, Tuple

from tradefair.config import SlotRequirements, Thresholds
from tradefair.lineup import split_roster
from tradefair.models import Player
from tradefair.valuation import ScoringContext, compute_per_game, extract_categories

from .impact import TeamImpact, team_trade_impact
from .verdict import Verdict, verdict


logger = logging.getLogger(__name__)

IMPACT_PRECISION = 3


class TradePreconditionError(ValueError):
    """Raised when an evaluation is missing league settings or a roster."""


@dataclass(frozen=True)
class TradeEvaluation:
    impact_a: float
    impact_b: float
    verdict: Verdict
    team_a: TeamImpact
    team_b: TeamImpact
    outgoing_a: Tuple[Player, ...]
    outgoing_b: Tuple[Player, ...]
    context: ScoringContext


def _unique_population(groups: Iterable[Sequence[Player]]) -> List[Player]:
    seen: set[str] = set()
    population: List[Player] = []
    for group in groups:
        for player in group:
            if player.player_key in seen:
                continue
            seen.add(player.player_key)
            population.append(player)
    return population


def _resolve_outgoing(roster: Sequence[Player], keys: Iterable[str], *, side: str) -> Tuple[Player, ...]:
    by_key = {player.player_key: player for player in roster}
    resolved: List[Player] = []
    for key in dict.fromkeys(keys):
        player = by_key.get(key)
        if player is None:
            logger.debug("Dropping unknown player key %s from team %s trade list", key, side)
            continue
        resolved.append(player)
    return tuple(resolved)


def evaluate_trade(
    settings: Mapping[str, Any] | None,
    roster_a: Sequence[Player] | None,
    roster_b: Sequence[Player] | None,
    free_agents: Sequence[Player] | None = None,
    send_a: Iterable[str] = (),
    send_b: Iterable[str] = (),
    thresholds: Thresholds | None = None,
) -> TradeEvaluation:
    """Value both rosters and the free-agent pool together, then score the trade."""

    if not isinstance(settings, Mapping):
        raise TradePreconditionError("League settings are required to evaluate a trade")
    if roster_a is None or roster_b is None:
        raise TradePreconditionError("Both team rosters are required to evaluate a trade")

    categories = extract_categories(settings)
    requirements = SlotRequirements.from_settings(settings)
    if not categories:
        logger.warning("League settings expose no scoring categories; all values will be 0")

    roster_a = compute_per_game(roster_a)
    roster_b = compute_per_game(roster_b)
    rostered = {player.player_key for player in (*roster_a, *roster_b)}
    free_agents = compute_per_game(
        player for player in free_agents or [] if player.player_key not in rostered
    )

    context = ScoringContext.from_pool(
        _unique_population([roster_a, roster_b, free_agents]), categories
    )
    roster_a = context.apply(roster_a)
    roster_b = context.apply(roster_b)
    free_agents = context.apply(free_agents)

    outgoing_a = _resolve_outgoing(roster_a, send_a, side="A")
    outgoing_b = _resolve_outgoing(roster_b, send_b, side="B")

    team_a = team_trade_impact(
        split_roster(roster_a, requirements),
        outgoing=[player.player_key for player in outgoing_a],
        incoming=outgoing_b,
        free_agents=free_agents,
        requirements=requirements,
    )
    team_b = team_trade_impact(
        split_roster(roster_b, requirements),
        outgoing=[player.player_key for player in outgoing_b],
        incoming=outgoing_a,
        free_agents=free_agents,
        requirements=requirements,
    )

    result = verdict(team_a.impact, team_b.impact, thresholds)
    logger.info(
        "Evaluated trade (%d for %d players): impact_a=%.3f impact_b=%.3f -> %s",
        len(outgoing_a),
        len(outgoing_b),
        team_a.impact,
        team_b.impact,
        result.status.value,
    )
    return TradeEvaluation(
        impact_a=round(team_a.impact, IMPACT_PRECISION),
        impact_b=round(team_b.impact, IMPACT_PRECISION),
        verdict=result,
        team_a=team_a,
        team_b=team_b,
        outgoing_a=outgoing_a,
        outgoing_b=outgoing_b,
        context=context,
    )
