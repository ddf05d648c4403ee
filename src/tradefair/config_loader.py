"""Persist and load CLI threshold profiles."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from tradefair.config import Thresholds


@dataclass
class ThresholdProfile:
    loss_tol: Optional[float] = None
    gain_min: Optional[float] = None
    imbalance_max: Optional[float] = None

    @classmethod
    def load(cls, path: Path) -> "ThresholdProfile":
        data = json.loads(path.read_text(encoding="utf-8"))
        return cls(
            loss_tol=data.get("loss_tol"),
            gain_min=data.get("gain_min"),
            imbalance_max=data.get("imbalance_max"),
        )

    def save(self, path: Path) -> None:
        payload = {
            "loss_tol": self.loss_tol,
            "gain_min": self.gain_min,
            "imbalance_max": self.imbalance_max,
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    def apply(self, thresholds: Thresholds) -> Thresholds:
        return thresholds.merged(
            loss_tol=self.loss_tol,
            gain_min=self.gain_min,
            imbalance_max=self.imbalance_max,
        )
