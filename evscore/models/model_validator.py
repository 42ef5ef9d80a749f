"""Validator record model."""

from pydantic import BaseModel, ConfigDict, Field

from evscore.consts import (
    SAMPLE_ATTESTATIONS_CREATED,
    SAMPLE_ATTESTATIONS_INCLUDED,
    SAMPLE_BLOCKS_ASSIGNED,
    SAMPLE_BLOCKS_PROPOSED,
    SAMPLE_BLOCKS_PROPOSED_INCLUDED,
    SAMPLE_BLOCKS_SIGNED,
    SAMPLE_CURRENT_BALANCE,
    SAMPLE_INITIAL_BALANCE,
    SAMPLE_SLASHINGS,
)


class ValidatorRecord(BaseModel):
    """Performance counters and balances for a single validator.

    The record is immutable once built. Counts are not range-checked:
    callers are expected to supply assigned >= signed >= 0,
    proposed >= included >= 0, created >= included >= 0 and a positive
    initial balance. Zero denominators are not rejected and produce
    non-finite sub-scores downstream.
    """

    model_config = ConfigDict(frozen=True)

    total_blocks_signed: int = Field(description="Blocks signed by the validator")
    total_blocks_assigned: int = Field(description="Blocks assigned to the validator")
    total_blocks_proposed: int = Field(description="Blocks proposed by the validator")
    total_blocks_proposed_included: int = Field(
        description="Proposed blocks included in the chain"
    )
    total_attestations_created: int = Field(description="Attestations created")
    total_attestations_included: int = Field(
        description="Attestations included in the chain"
    )
    number_of_slashings: int = Field(description="Slashing events suffered")
    initial_validator_balance: float = Field(description="Balance when the validator joined")
    current_validator_balance: float = Field(description="Balance now")

    @classmethod
    def sample(cls) -> "ValidatorRecord":
        """Build the compiled-in sample validator."""
        return cls(
            total_blocks_signed=SAMPLE_BLOCKS_SIGNED,
            total_blocks_assigned=SAMPLE_BLOCKS_ASSIGNED,
            total_blocks_proposed=SAMPLE_BLOCKS_PROPOSED,
            total_blocks_proposed_included=SAMPLE_BLOCKS_PROPOSED_INCLUDED,
            total_attestations_created=SAMPLE_ATTESTATIONS_CREATED,
            total_attestations_included=SAMPLE_ATTESTATIONS_INCLUDED,
            number_of_slashings=SAMPLE_SLASHINGS,
            initial_validator_balance=SAMPLE_INITIAL_BALANCE,
            current_validator_balance=SAMPLE_CURRENT_BALANCE,
        )
