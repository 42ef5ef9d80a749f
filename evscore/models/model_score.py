"""Score result models.

Values here are never clamped and may be infinite or NaN when the record
holds a zero denominator.
"""

import math

from pydantic import BaseModel, ConfigDict, Field, computed_field


class _ScoreModel(BaseModel):
    """Base for score models; JSON keeps inf/NaN as Infinity/NaN constants."""

    model_config = ConfigDict(ser_json_inf_nan="constants")


class ScoreBreakdown(_ScoreModel):
    """Raw sub-scores before weighting."""

    uptime: float = Field(description="Signed / assigned blocks, percent")
    proposal_inclusion: float = Field(description="Included / proposed blocks, percent")
    attestation_inclusion: float = Field(
        description="Included / created attestations, percent"
    )
    slashing_prevention: float = Field(description="1 - slashings / total validators")
    balance_growth: float = Field(description="Relative balance change, ratio")


class WeightedContributions(_ScoreModel):
    """Each sub-score multiplied by its weight."""

    uptime: float
    proposal_inclusion: float
    attestation_inclusion: float
    slashing_prevention: float
    balance_growth: float


class ValidatorScore(_ScoreModel):
    """Composite Ethereum Validator Score with its components."""

    breakdown: ScoreBreakdown
    contributions: WeightedContributions
    score: float = Field(description="Sum of the weighted contributions")

    @computed_field
    @property
    def is_finite(self) -> bool:
        """Whether the final score is a finite number."""
        return math.isfinite(self.score)
