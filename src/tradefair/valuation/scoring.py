"""Per-game normalization and population-relative player values."""

from __future__ import annotations

from dataclasses import dataclass
from statistics import fmean, pstdev
from typing import Iterable, List, Mapping, Sequence

from tradefair.models import Category, Player


STDEV_FLOOR = 1e-9
VALUE_PRECISION = 4


def compute_per_game(players: Iterable[Player]) -> List[Player]:
    """Return copies of ``players`` with ``per_game`` rates filled in.

    Players without games played get an empty ``per_game`` mapping, which scores as
    zero in every category.
    """

    normalized: List[Player] = []
    for player in players:
        games = player.games_played
        if games > 0:
            per_game = {stat_id: total / games for stat_id, total in player.raw_stats.items()}
        else:
            per_game = {}
        normalized.append(player.model_copy(update={"per_game": per_game}))
    return normalized


@dataclass(frozen=True)
class ScoringContext:
    """Population statistics that a set of player values is measured against.

    A context belongs to exactly one comparison population. Build a fresh one whenever
    the population changes; values from different contexts are not comparable.
    """

    categories: tuple[Category, ...]
    means: Mapping[int, float]
    stdevs: Mapping[int, float]
    population: int

    @classmethod
    def from_pool(cls, pool: Sequence[Player], categories: Sequence[Category]) -> "ScoringContext":
        means: dict[int, float] = {}
        stdevs: dict[int, float] = {}
        for category in categories:
            values = [player.per_game.get(category.id, 0.0) for player in pool]
            if values:
                means[category.id] = fmean(values)
                stdevs[category.id] = pstdev(values) or STDEV_FLOOR
            else:
                means[category.id] = 0.0
                stdevs[category.id] = STDEV_FLOOR
        return cls(
            categories=tuple(categories),
            means=means,
            stdevs=stdevs,
            population=len(pool),
        )

    def score(self, player: Player) -> float:
        total = 0.0
        for category in self.categories:
            rate = player.per_game.get(category.id, 0.0)
            total += (rate - self.means[category.id]) / self.stdevs[category.id]
        return round(total, VALUE_PRECISION)

    def apply(self, pool: Iterable[Player]) -> List[Player]:
        return [player.model_copy(update={"value": self.score(player)}) for player in pool]


def value_players(pool: Sequence[Player], categories: Sequence[Category]) -> List[Player]:
    """Score every player in ``pool`` against the pool itself."""

    context = ScoringContext.from_pool(pool, categories)
    return context.apply(pool)
