"""Pydantic models for evscore."""

from evscore.models.model_eval import EvalContext, ScoreWeights
from evscore.models.model_score import ScoreBreakdown, ValidatorScore, WeightedContributions
from evscore.models.model_validator import ValidatorRecord

__all__ = [
    # Input
    "ValidatorRecord",
    # Evaluation models
    "EvalContext",
    "ScoreWeights",
    # Results
    "ScoreBreakdown",
    "ValidatorScore",
    "WeightedContributions",
]
