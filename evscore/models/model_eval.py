"""Evaluation context models for scoring validators."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from evscore.consts import (
    DEFAULT_TOTAL_VALIDATORS,
    WEIGHT_ATTESTATION_INCLUSION,
    WEIGHT_BALANCE_GROWTH,
    WEIGHT_PROPOSAL_INCLUSION,
    WEIGHT_SLASHING_PREVENTION,
    WEIGHT_UPTIME,
)


class ScoreWeights(BaseModel):
    """Fixed dimension weights for the validator score.

    All weights must sum to 1.0 for proper score calculation.
    """

    model_config = ConfigDict(frozen=True)

    uptime: float = Field(default=WEIGHT_UPTIME, ge=0.0, le=1.0)
    proposal_inclusion: float = Field(default=WEIGHT_PROPOSAL_INCLUSION, ge=0.0, le=1.0)
    attestation_inclusion: float = Field(default=WEIGHT_ATTESTATION_INCLUSION, ge=0.0, le=1.0)
    slashing_prevention: float = Field(default=WEIGHT_SLASHING_PREVENTION, ge=0.0, le=1.0)
    balance_growth: float = Field(default=WEIGHT_BALANCE_GROWTH, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def weights_sum_to_one(self) -> "ScoreWeights":
        """Validate that weights sum to 1.0."""
        total = (
            self.uptime
            + self.proposal_inclusion
            + self.attestation_inclusion
            + self.slashing_prevention
            + self.balance_growth
        )
        if abs(total - 1.0) > 0.001:
            msg = f"Weights must sum to 1.0, got {total}"
            raise ValueError(msg)
        return self


class EvalContext(BaseModel):
    """Evaluation context for stateless evaluators.

    Everything an evaluator needs besides the validator record itself
    comes through this context.
    """

    total_validators: int = Field(
        default=DEFAULT_TOTAL_VALIDATORS, description="Size of the validator set"
    )
    weights: ScoreWeights = Field(default_factory=ScoreWeights)
