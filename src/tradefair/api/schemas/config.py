from __future__ import annotations

from pydantic import BaseModel, Field


class ThresholdsResponse(BaseModel):
    # Serialized with the camelCase keys existing UI clients read.
    loss_tol: float = Field(serialization_alias="lossTolerance")
    gain_min: float = Field(serialization_alias="gainMin")
    imbalance_max: float = Field(serialization_alias="imbalanceMax")
