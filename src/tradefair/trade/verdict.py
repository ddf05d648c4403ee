"""Two-state classification of a pair of trade impacts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from tradefair.config import Thresholds


class VerdictStatus(str, Enum):
    APPROVE = "APPROVE"
    REVIEW = "REVIEW"


_COLORS = {
    VerdictStatus.APPROVE: "green",
    VerdictStatus.REVIEW: "yellow",
}


@dataclass(frozen=True)
class Verdict:
    status: VerdictStatus
    impact_a: float
    impact_b: float

    @property
    def color(self) -> str:
        return _COLORS[self.status]

    @property
    def approved(self) -> bool:
        return self.status is VerdictStatus.APPROVE


def verdict(impact_a: float, impact_b: float, thresholds: Thresholds | None = None) -> Verdict:
    """APPROVE when neither side loses too much, one side gains enough and the
    gap between the sides stays within ``imbalance_max``; REVIEW otherwise."""

    thresholds = thresholds or Thresholds()
    both_tolerable = impact_a >= thresholds.loss_tol and impact_b >= thresholds.loss_tol
    one_gains = impact_a >= thresholds.gain_min or impact_b >= thresholds.gain_min
    balanced = abs(impact_a - impact_b) <= thresholds.imbalance_max

    if both_tolerable and one_gains and balanced:
        status = VerdictStatus.APPROVE
    else:
        status = VerdictStatus.REVIEW
    return Verdict(status=status, impact_a=impact_a, impact_b=impact_b)
