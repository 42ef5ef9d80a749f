"""Balance growth evaluator."""

from evscore.evaluators.base import ratio
from evscore.models.model_eval import EvalContext
from evscore.models.model_validator import ValidatorRecord


class BalanceGrowthEvaluator:
    """Relative change of the validator balance since joining.

    BG = (current - initial) / initial

    This is a plain ratio (0.0625 for 32 -> 34 ETH), not a percentage like
    the other dimensions, and it is weighted on that scale.
    """

    def evaluate(self, record: ValidatorRecord, context: EvalContext) -> float:
        growth = record.current_validator_balance - record.initial_validator_balance
        return ratio(growth, record.initial_validator_balance)
