"""Pydantic models for API I/O."""

from .config import ThresholdsResponse
from .evaluate import (
    EvaluateRequest,
    EvaluateResponse,
    LineupPlayerResponse,
    TeamImpactResponse,
    ThresholdOverrides,
    VerdictResponse,
)

__all__ = [
    "EvaluateRequest",
    "EvaluateResponse",
    "LineupPlayerResponse",
    "TeamImpactResponse",
    "ThresholdOverrides",
    "ThresholdsResponse",
    "VerdictResponse",
]
