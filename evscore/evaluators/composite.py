"""Composite scoring functions for combining dimension scores."""

from evscore.models.model_eval import ScoreWeights
from evscore.models.model_score import ScoreBreakdown, WeightedContributions


def calculate_contributions(
    breakdown: ScoreBreakdown, weights: ScoreWeights
) -> WeightedContributions:
    """Weight each sub-score.

    Args:
        breakdown: Raw sub-scores
        weights: Dimension weights (must sum to 1.0)

    Returns:
        Each sub-score multiplied by its weight
    """
    return WeightedContributions(
        uptime=breakdown.uptime * weights.uptime,
        proposal_inclusion=breakdown.proposal_inclusion * weights.proposal_inclusion,
        attestation_inclusion=breakdown.attestation_inclusion * weights.attestation_inclusion,
        slashing_prevention=breakdown.slashing_prevention * weights.slashing_prevention,
        balance_growth=breakdown.balance_growth * weights.balance_growth,
    )


def calculate_validator_score(breakdown: ScoreBreakdown, weights: ScoreWeights) -> float:
    """Calculate the weighted composite validator score.

    EVS = US*0.4 + PIR*0.2 + AIR*0.2 + SP*0.1 + BG*0.1

    The percentage-scale terms and the ratio-scale balance growth are summed
    as they are, without normalization. A non-finite sub-score makes the
    result non-finite.

    Args:
        breakdown: Raw sub-scores
        weights: Dimension weights (must sum to 1.0)

    Returns:
        Unclamped composite score
    """
    return sum_contributions(calculate_contributions(breakdown, weights))


def sum_contributions(contributions: WeightedContributions) -> float:
    """Add up weighted contributions in the order US, PIR, AIR, SP, BG."""
    return (
        contributions.uptime
        + contributions.proposal_inclusion
        + contributions.attestation_inclusion
        + contributions.slashing_prevention
        + contributions.balance_growth
    )
