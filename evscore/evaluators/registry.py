"""Evaluator registry for orchestrating all dimension evaluators."""

import logging

from evscore.consts import DEFAULT_TOTAL_VALIDATORS
from evscore.evaluators.balance import BalanceGrowthEvaluator
from evscore.evaluators.base import BaseEvaluator
from evscore.evaluators.composite import calculate_contributions, sum_contributions
from evscore.evaluators.inclusion import AttestationInclusionEvaluator, ProposalInclusionEvaluator
from evscore.evaluators.slashing import SlashingPreventionEvaluator
from evscore.evaluators.uptime import UptimeEvaluator
from evscore.models.model_eval import EvalContext
from evscore.models.model_score import ScoreBreakdown, ValidatorScore
from evscore.models.model_validator import ValidatorRecord

logger = logging.getLogger(__name__)


class EvaluatorRegistry:
    """Orchestrates all evaluators to score a validator.

    It handles:
    - Running the five dimension evaluators
    - Weighting each dimension
    - Summing the weighted contributions into the final score
    """

    def __init__(self) -> None:
        """Initialize registry with all evaluators."""
        self.evaluators: dict[str, BaseEvaluator] = {
            "uptime": UptimeEvaluator(),
            "proposal_inclusion": ProposalInclusionEvaluator(),
            "attestation_inclusion": AttestationInclusionEvaluator(),
            "slashing_prevention": SlashingPreventionEvaluator(),
            "balance_growth": BalanceGrowthEvaluator(),
        }

    def evaluate_validator(self, record: ValidatorRecord, context: EvalContext) -> ValidatorScore:
        """Evaluate a validator on every dimension and combine the results.

        Args:
            record: The validator to evaluate
            context: Evaluation context with the validator set size and weights

        Returns:
            Score with breakdown and weighted contributions
        """
        # 1. Evaluate each dimension
        breakdown = ScoreBreakdown(
            uptime=self.evaluators["uptime"].evaluate(record, context),
            proposal_inclusion=self.evaluators["proposal_inclusion"].evaluate(record, context),
            attestation_inclusion=self.evaluators["attestation_inclusion"].evaluate(
                record, context
            ),
            slashing_prevention=self.evaluators["slashing_prevention"].evaluate(record, context),
            balance_growth=self.evaluators["balance_growth"].evaluate(record, context),
        )
        logger.debug(f"Sub-scores: {breakdown.model_dump()}")

        # 2. Weight and combine
        contributions = calculate_contributions(breakdown, context.weights)
        score = sum_contributions(contributions)
        logger.debug(f"Validator score: {score}")

        return ValidatorScore(breakdown=breakdown, contributions=contributions, score=score)


def score_validator(
    record: ValidatorRecord, total_validators: int = DEFAULT_TOTAL_VALIDATORS
) -> float:
    """Compute the Ethereum Validator Score of one validator with the fixed weights."""
    context = EvalContext(total_validators=total_validators)
    return EvaluatorRegistry().evaluate_validator(record, context).score
