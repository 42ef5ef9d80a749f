"""Pytest configuration and fixtures."""

import pytest

from evscore.models.model_eval import EvalContext, ScoreWeights
from evscore.models.model_validator import ValidatorRecord


@pytest.fixture
def sample_record() -> ValidatorRecord:
    """Create the sample validator used by the CLI defaults."""
    return ValidatorRecord(
        total_blocks_signed=950,
        total_blocks_assigned=1000,
        total_blocks_proposed=100,
        total_blocks_proposed_included=98,
        total_attestations_created=1200,
        total_attestations_included=1180,
        number_of_slashings=0,
        initial_validator_balance=32.0,
        current_validator_balance=34.0,
    )


@pytest.fixture
def sample_context() -> EvalContext:
    """Create evaluation context for a 1000-validator network."""
    return EvalContext(total_validators=1000, weights=ScoreWeights())
