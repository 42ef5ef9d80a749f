"""Inclusion rate evaluators for block proposals and attestations.

Both rates are percentages and are not capped: an input reporting more
included items than produced yields a rate above 100.
"""

from evscore.evaluators.base import ratio
from evscore.models.model_eval import EvalContext
from evscore.models.model_validator import ValidatorRecord


class ProposalInclusionEvaluator:
    """Share of proposed blocks that made it into the chain.

    PIR = proposed_and_included / proposed * 100
    """

    def evaluate(self, record: ValidatorRecord, context: EvalContext) -> float:
        return (
            ratio(record.total_blocks_proposed_included, record.total_blocks_proposed) * 100.0
        )


class AttestationInclusionEvaluator:
    """Share of created attestations that were included.

    AIR = attestations_included / attestations_created * 100
    """

    def evaluate(self, record: ValidatorRecord, context: EvalContext) -> float:
        return (
            ratio(record.total_attestations_included, record.total_attestations_created)
            * 100.0
        )
