"""Evaluators for scoring a validator across five dimensions.

A validator is evaluated on:
- Uptime (signed / assigned blocks)
- Proposal inclusion (included / proposed blocks)
- Attestation inclusion (included / created attestations)
- Slashing prevention (slashings relative to the validator set)
- Balance growth (relative balance change)

All evaluators are stateless pure functions that take ValidatorRecord + EvalContext → score.
"""

from evscore.evaluators.balance import BalanceGrowthEvaluator
from evscore.evaluators.base import BaseEvaluator, ratio
from evscore.evaluators.composite import (
    calculate_contributions,
    calculate_validator_score,
    sum_contributions,
)
from evscore.evaluators.inclusion import AttestationInclusionEvaluator, ProposalInclusionEvaluator
from evscore.evaluators.registry import EvaluatorRegistry, score_validator
from evscore.evaluators.slashing import SlashingPreventionEvaluator
from evscore.evaluators.uptime import UptimeEvaluator

__all__ = [
    # Protocol
    "BaseEvaluator",
    # Individual evaluators
    "UptimeEvaluator",
    "ProposalInclusionEvaluator",
    "AttestationInclusionEvaluator",
    "SlashingPreventionEvaluator",
    "BalanceGrowthEvaluator",
    # Orchestration
    "EvaluatorRegistry",
    "score_validator",
    # Composite scoring
    "calculate_contributions",
    "calculate_validator_score",
    "sum_contributions",
    # Utilities
    "ratio",
]
