"""Verdict thresholds and their environment overrides."""

from __future__ import annotations

import logging
import os

from pydantic import BaseModel
from pydantic.config import ConfigDict


logger = logging.getLogger(__name__)

LOSS_TOLERANCE_ENV = "TRADEFAIR_LOSS_TOLERANCE"
GAIN_MIN_ENV = "TRADEFAIR_GAIN_MIN"
IMBALANCE_MAX_ENV = "TRADEFAIR_IMBALANCE_MAX"

# Unprefixed names used by existing .env files; the prefixed name wins when both are set.
LEGACY_ENV_NAMES = {
    LOSS_TOLERANCE_ENV: "LOSS_TOLERANCE",
    GAIN_MIN_ENV: "GAIN_MIN",
    IMBALANCE_MAX_ENV: "IMBALANCE_MAX",
}

DEFAULT_LOSS_TOLERANCE = -0.35
DEFAULT_GAIN_MIN = 0.25
DEFAULT_IMBALANCE_MAX = 1.0


def _env_float(name: str, default: float) -> float:
    for candidate in (name, LEGACY_ENV_NAMES.get(name)):
        if candidate is None:
            continue
        raw = os.getenv(candidate)
        if raw is None or not raw.strip():
            continue
        try:
            return float(raw)
        except ValueError:
            logger.warning("Invalid float for %s: %s; using default %.2f", candidate, raw, default)
            return default
    return default


class Thresholds(BaseModel):
    """Cut-offs used to classify a pair of trade impacts."""

    loss_tol: float = DEFAULT_LOSS_TOLERANCE
    gain_min: float = DEFAULT_GAIN_MIN
    imbalance_max: float = DEFAULT_IMBALANCE_MAX

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_env(cls) -> "Thresholds":
        return cls(
            loss_tol=_env_float(LOSS_TOLERANCE_ENV, DEFAULT_LOSS_TOLERANCE),
            gain_min=_env_float(GAIN_MIN_ENV, DEFAULT_GAIN_MIN),
            imbalance_max=_env_float(IMBALANCE_MAX_ENV, DEFAULT_IMBALANCE_MAX),
        )

    def merged(
        self,
        *,
        loss_tol: float | None = None,
        gain_min: float | None = None,
        imbalance_max: float | None = None,
    ) -> "Thresholds":
        """Return a copy with every non-``None`` override applied."""

        update = {
            key: value
            for key, value in (
                ("loss_tol", loss_tol),
                ("gain_min", gain_min),
                ("imbalance_max", imbalance_max),
            )
            if value is not None
        }
        return self.model_copy(update=update) if update else self
