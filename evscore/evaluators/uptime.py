"""Uptime evaluator."""

from evscore.evaluators.base import ratio
from evscore.models.model_eval import EvalContext
from evscore.models.model_validator import ValidatorRecord


class UptimeEvaluator:
    """Share of assigned blocks the validator actually signed.

    US = signed / assigned * 100
    """

    def evaluate(self, record: ValidatorRecord, context: EvalContext) -> float:
        return ratio(record.total_blocks_signed, record.total_blocks_assigned) * 100.0
