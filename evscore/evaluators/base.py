"""Base evaluator protocol and shared arithmetic."""

import math
from typing import Protocol

from evscore.models.model_eval import EvalContext
from evscore.models.model_validator import ValidatorRecord


class BaseEvaluator(Protocol):
    """Protocol defining the evaluator contract.

    Evaluators are pure functions of a ValidatorRecord and an EvalContext.
    They never clamp their result and never raise on a zero denominator:
    an undefined ratio comes back as inf or NaN and is left to propagate.
    """

    def evaluate(self, record: ValidatorRecord, context: EvalContext) -> float:
        """Evaluate the validator on this dimension.

        Args:
            record: The validator to evaluate
            context: Evaluation context with the validator set size and weights

        Returns:
            Unclamped sub-score for this dimension
        """
        ...


def ratio(numerator: float, denominator: float) -> float:
    """Divide with IEEE-754 semantics instead of raising ZeroDivisionError.

    x / 0 is +inf or -inf depending on the signs of x and the zero,
    0 / 0 and NaN / 0 are NaN.
    """
    numerator = float(numerator)
    denominator = float(denominator)
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator
