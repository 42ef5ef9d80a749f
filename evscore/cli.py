"""CLI interface for evscore."""

import logging
import math

import typer
from rich.console import Console
from rich.table import Table

from evscore.consts import DEFAULT_TOTAL_VALIDATORS, SCORE_LINE_TEMPLATE
from evscore.evaluators.registry import EvaluatorRegistry
from evscore.models.model_eval import EvalContext
from evscore.models.model_score import ValidatorScore
from evscore.models.model_validator import ValidatorRecord

app = typer.Typer(
    name="evs",
    help="evscore - Composite Ethereum Validator Score",
    add_completion=False,
)

console = Console()

DIMENSION_LABELS = {
    "uptime": "Uptime",
    "proposal_inclusion": "Proposal inclusion",
    "attestation_inclusion": "Attestation inclusion",
    "slashing_prevention": "Slashing prevention",
    "balance_growth": "Balance growth",
}


def format_score(value: float) -> str:
    """Format a score with exactly two decimals.

    Infinities render as inf and -inf, an undefined score as NaN.
    """
    if math.isnan(value):
        return "NaN"
    return f"{value:.2f}"


def _print_breakdown(result: ValidatorScore, context: EvalContext) -> None:
    """Print sub-scores, weights and weighted contributions as a table."""
    table = Table(title="Score Breakdown")
    table.add_column("Dimension", style="cyan")
    table.add_column("Sub-score", justify="right")
    table.add_column("Weight", justify="right", style="magenta")
    table.add_column("Contribution", justify="right", style="green")

    breakdown = result.breakdown.model_dump()
    contributions = result.contributions.model_dump()
    weights = context.weights.model_dump()
    for name, label in DIMENSION_LABELS.items():
        table.add_row(
            label,
            format_score(breakdown[name]),
            f"{weights[name]:.2f}",
            format_score(contributions[name]),
        )

    console.print(table)


@app.command()
def score(
    blocks_signed: int = typer.Option(
        None, "--blocks-signed", help="Blocks signed by the validator [default: sample]"
    ),
    blocks_assigned: int = typer.Option(
        None, "--blocks-assigned", help="Blocks assigned to the validator [default: sample]"
    ),
    blocks_proposed: int = typer.Option(
        None, "--blocks-proposed", help="Blocks proposed by the validator [default: sample]"
    ),
    blocks_included: int = typer.Option(
        None, "--blocks-included", help="Proposed blocks included in the chain [default: sample]"
    ),
    attestations_created: int = typer.Option(
        None, "--attestations-created", help="Attestations created [default: sample]"
    ),
    attestations_included: int = typer.Option(
        None, "--attestations-included", help="Attestations included [default: sample]"
    ),
    slashings: int = typer.Option(None, "--slashings", help="Slashing events [default: sample]"),
    initial_balance: float = typer.Option(
        None, "--initial-balance", help="Balance when the validator joined [default: sample]"
    ),
    current_balance: float = typer.Option(
        None, "--current-balance", help="Current validator balance [default: sample]"
    ),
    total_validators: int = typer.Option(
        DEFAULT_TOTAL_VALIDATORS, "--total-validators", help="Size of the validator set"
    ),
    breakdown: bool = typer.Option(False, "--breakdown", help="Show the per-dimension table"),
    as_json: bool = typer.Option(False, "--json", help="Print the full result as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Compute the Ethereum Validator Score (defaults to the built-in sample validator)."""
    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        overrides = {
            "total_blocks_signed": blocks_signed,
            "total_blocks_assigned": blocks_assigned,
            "total_blocks_proposed": blocks_proposed,
            "total_blocks_proposed_included": blocks_included,
            "total_attestations_created": attestations_created,
            "total_attestations_included": attestations_included,
            "number_of_slashings": slashings,
            "initial_validator_balance": initial_balance,
            "current_validator_balance": current_balance,
        }
        # Options left unset keep the sample validator's values
        record = ValidatorRecord.sample().model_copy(
            update={field: value for field, value in overrides.items() if value is not None}
        )
        context = EvalContext(total_validators=total_validators)
        result = EvaluatorRegistry().evaluate_validator(record, context)
    except Exception as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if as_json:
        console.print_json(result.model_dump_json())
        return

    console.print(SCORE_LINE_TEMPLATE.format(score=format_score(result.score)), highlight=False)

    if breakdown:
        console.print()
        _print_breakdown(result, context)


if __name__ == "__main__":
    app()
