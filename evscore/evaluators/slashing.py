"""Slashing prevention evaluator."""

from evscore.evaluators.base import ratio
from evscore.models.model_eval import EvalContext
from evscore.models.model_validator import ValidatorRecord


class SlashingPreventionEvaluator:
    """Penalizes slashings relative to the size of the validator set.

    SP = 1 - slashings / total_validators

    The total comes from the context since it is a property of the network,
    not of the validator. SP is 1.0 for a clean validator and exactly 0.0
    when the slashing count equals the validator set size.
    """

    def evaluate(self, record: ValidatorRecord, context: EvalContext) -> float:
        return 1.0 - ratio(record.number_of_slashings, context.total_validators)
