"""REST API for trade evaluation."""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException

from tradefair.api.schemas import (
    EvaluateRequest,
    EvaluateResponse,
    LineupPlayerResponse,
    TeamImpactResponse,
    ThresholdsResponse,
    VerdictResponse,
)
from tradefair.config import Thresholds
from tradefair.ingest import normalize_players
from tradefair.trade import TeamImpact, TradeEvaluation, TradePreconditionError, evaluate_trade


logger = logging.getLogger("uvicorn.error")


def _team_to_response(team: TeamImpact) -> TeamImpactResponse:
    backfill_keys = {player.player_key for player in team.backfill}
    return TeamImpactResponse(
        impact=round(team.impact, 3),
        strength=round(team.strength, 4),
        baseline=round(team.baseline, 4),
        lineup=[
            LineupPlayerResponse(
                player_key=player.player_key,
                name=player.name,
                positions=sorted(player.positions),
                value=player.value,
                free_agent=player.player_key in backfill_keys,
            )
            for player in team.lineup
        ],
    )


def evaluation_to_response(
    evaluation: TradeEvaluation,
    *,
    team_a_key: str | None = None,
    team_b_key: str | None = None,
    send_a: list[str] | None = None,
    send_b: list[str] | None = None,
) -> EvaluateResponse:
    return EvaluateResponse(
        team_a_key=team_a_key,
        team_b_key=team_b_key,
        send_a=list(send_a or []),
        send_b=list(send_b or []),
        impact_a=evaluation.impact_a,
        impact_b=evaluation.impact_b,
        verdict=VerdictResponse(
            status=evaluation.verdict.status.value,
            color=evaluation.verdict.color,
        ),
        team_a=_team_to_response(evaluation.team_a),
        team_b=_team_to_response(evaluation.team_b),
    )


def run_evaluation(request: EvaluateRequest, defaults: Thresholds) -> EvaluateResponse:
    """Normalize a request payload and evaluate it; raises ``TradePreconditionError``."""

    overrides = request.thresholds
    thresholds = defaults.merged(**overrides.model_dump()) if overrides else defaults
    evaluation = evaluate_trade(
        request.league_settings,
        normalize_players(request.roster_a) if request.roster_a is not None else None,
        normalize_players(request.roster_b) if request.roster_b is not None else None,
        normalize_players(request.free_agents),
        send_a=request.send_a,
        send_b=request.send_b,
        thresholds=thresholds,
    )
    return evaluation_to_response(
        evaluation,
        team_a_key=request.team_a_key,
        team_b_key=request.team_b_key,
        send_a=request.send_a,
        send_b=request.send_b,
    )


def create_app(thresholds: Thresholds | None = None) -> FastAPI:
    app = FastAPI(title="tradefair")
    app.state.thresholds = thresholds or Thresholds.from_env()

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/api/config", response_model=ThresholdsResponse)
    async def config() -> ThresholdsResponse:
        active: Thresholds = app.state.thresholds
        return ThresholdsResponse(**active.model_dump())

    @app.post("/api/evaluate", response_model=EvaluateResponse)
    async def evaluate(request: EvaluateRequest) -> EvaluateResponse:
        try:
            return run_evaluation(request, app.state.thresholds)
        except TradePreconditionError as exc:
            logger.warning("Trade evaluation rejected: %s", exc)
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    return app
