"""Canonical player and category models shared across the evaluation pipeline."""

from __future__ import annotations

import math
from typing import Any, Dict, FrozenSet, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


def coerce_number(value: Any, default: float = 0.0) -> float:
    """Return ``value`` as a finite float, or ``default`` when it is not numeric."""

    if isinstance(value, bool):
        return float(value)
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(number):
        return default
    return number


def parse_stat_id(raw: Any) -> Optional[int]:
    """Return an integral stat id, or ``None`` for missing, fractional or non-numeric input."""

    if isinstance(raw, bool) or raw is None:
        return None
    try:
        number = float(raw)
    except (TypeError, ValueError):
        return None
    if not number.is_integer():
        return None
    return int(number)


class Category(BaseModel):
    """A single scored statistical dimension keyed by its provider stat id."""

    id: int
    name: str
    position_type: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class Player(BaseModel):
    """Normalized player payload used by the valuation and trade pipelines."""

    player_key: str = Field(..., min_length=1)
    name: str = "Unknown"
    positions: FrozenSet[str] = Field(default_factory=frozenset)
    raw_stats: Dict[int, float] = Field(default_factory=dict)
    games_played: float = Field(default=0.0, ge=0.0)
    per_game: Dict[int, float] = Field(default_factory=dict)
    value: float = 0.0

    model_config = ConfigDict(frozen=True)

    @field_validator("positions", mode="before")
    @classmethod
    def _clean_positions(cls, value: Any) -> FrozenSet[str]:
        if value is None:
            return frozenset()
        if isinstance(value, str):
            value = value.replace(",", "/").split("/")
        return frozenset(str(pos).strip() for pos in value if pos is not None and str(pos).strip())

    @field_validator("raw_stats", mode="before")
    @classmethod
    def _clean_raw_stats(cls, value: Any) -> Dict[int, float]:
        if not isinstance(value, dict):
            return {}
        stats: Dict[int, float] = {}
        for key, raw in value.items():
            stat_id = parse_stat_id(key)
            if stat_id is None:
                continue
            stats[stat_id] = coerce_number(raw)
        return stats

    @field_validator("games_played", mode="before")
    @classmethod
    def _clean_games_played(cls, value: Any) -> float:
        return max(0.0, coerce_number(value))

    @property
    def is_goalie(self) -> bool:
        return "G" in self.positions
