from __future__ import annotations

from typing import Any, Dict, List, Literal

from pydantic import AliasChoices, BaseModel, Field


class ThresholdOverrides(BaseModel):
    loss_tol: float | None = Field(default=None, validation_alias=AliasChoices("loss_tol", "lossTolerance"))
    gain_min: float | None = Field(default=None, validation_alias=AliasChoices("gain_min", "gainMin"))
    imbalance_max: float | None = Field(
        default=None, validation_alias=AliasChoices("imbalance_max", "imbalanceMax")
    )


class EvaluateRequest(BaseModel):
    league_settings: Dict[str, Any] | None = None
    team_a_key: str | None = None
    team_b_key: str | None = None
    roster_a: List[Dict[str, Any]] | None = None
    roster_b: List[Dict[str, Any]] | None = None
    free_agents: List[Dict[str, Any]] = Field(default_factory=list)
    send_a: List[str] = Field(default_factory=list)
    send_b: List[str] = Field(default_factory=list)
    thresholds: ThresholdOverrides | None = None


class VerdictResponse(BaseModel):
    status: Literal["APPROVE", "REVIEW"]
    color: Literal["green", "yellow"]


class LineupPlayerResponse(BaseModel):
    player_key: str
    name: str
    positions: List[str]
    value: float
    free_agent: bool = False


class TeamImpactResponse(BaseModel):
    impact: float
    strength: float
    baseline: float
    lineup: List[LineupPlayerResponse]


class EvaluateResponse(BaseModel):
    team_a_key: str | None
    team_b_key: str | None
    send_a: List[str]
    send_b: List[str]
    impact_a: float
    impact_b: float
    verdict: VerdictResponse
    team_a: TeamImpactResponse
    team_b: TeamImpactResponse
