"""Tests for CLI interface."""

import json
import math
import re
from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from evscore.cli import app, format_score
from evscore.models.model_validator import ValidatorRecord

runner = CliRunner()


class TestFormatScore:
    """Tests for score formatting."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (77.372916, "77.37"),
            (0.0, "0.00"),
            (5.0, "5.00"),
            (-3.0, "-3.00"),
            (-0.456, "-0.46"),
            (1234567.891, "1234567.89"),
        ],
    )
    def test_two_decimals(self, value: float, expected: str) -> None:
        assert format_score(value) == expected

    @pytest.mark.parametrize("value", [1e-9, -1e-9, 12.5, -98765.4321, 1e12, -7.0])
    def test_always_two_digits_after_point(self, value: float) -> None:
        assert re.fullmatch(r"-?\d+\.\d{2}", format_score(value))

    def test_non_finite(self) -> None:
        assert format_score(math.inf) == "inf"
        assert format_score(-math.inf) == "-inf"
        assert format_score(math.nan) == "NaN"
        assert format_score(-math.nan) == "NaN"


class TestScoreCLI:
    """Tests for the score command."""

    def test_default_sample(self) -> None:
        """Test that running with no options prints the sample validator's score."""
        result = runner.invoke(app, [])
        assert result.exit_code == 0
        assert result.stdout.strip() == "Ethereum Validator Score: 77.37"

    def test_zero_assigned_prints_non_finite(self) -> None:
        result = runner.invoke(app, ["--blocks-assigned", "0"])
        assert result.exit_code == 0
        assert "Ethereum Validator Score: inf" in result.stdout

    def test_zero_over_zero_prints_NaN(self) -> None:
        result = runner.invoke(app, ["--blocks-signed", "0", "--blocks-assigned", "0"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "Ethereum Validator Score: NaN"

    def test_custom_record(self) -> None:
        result = runner.invoke(
            app,
            [
                "--blocks-signed", "1000",
                "--blocks-included", "100",
                "--attestations-included", "1200",
                "--current-balance", "32.0",
            ],
        )
        # 40 + 20 + 20 + 0.1 + 0
        assert result.exit_code == 0
        assert "Ethereum Validator Score: 80.10" in result.stdout

    def test_total_validators(self) -> None:
        result = runner.invoke(app, ["--slashings", "10", "--total-validators", "10"])
        assert result.exit_code == 0
        assert "Ethereum Validator Score: 77.27" in result.stdout

    def test_single_override_keeps_sample_values(self) -> None:
        """Unset options fall back to the sample validator."""
        result = runner.invoke(app, ["--blocks-assigned", "1900"])
        # uptime 50 instead of 95 costs 0.4 * 45 = 18 points
        assert result.exit_code == 0
        assert "Ethereum Validator Score: 59.37" in result.stdout

    def test_defaults_come_from_sample(self) -> None:
        """Test that the built-in record is ValidatorRecord.sample()."""
        record = ValidatorRecord.sample().model_copy(update={"total_blocks_signed": 1000})
        with patch.object(ValidatorRecord, "sample", return_value=record) as mock_sample:
            result = runner.invoke(app, [])
        mock_sample.assert_called_once_with()
        # uptime 100 instead of 95 adds 0.4 * 5 = 2 points
        assert result.exit_code == 0
        assert "Ethereum Validator Score: 79.37" in result.stdout

    def test_breakdown_NaN_row(self) -> None:
        result = runner.invoke(
            app, ["--breakdown", "--blocks-signed", "0", "--blocks-assigned", "0"]
        )
        assert result.exit_code == 0
        assert "NaN" in result.stdout
        assert "nan" not in result.stdout

    def test_breakdown(self) -> None:
        result = runner.invoke(app, ["--breakdown"])
        assert result.exit_code == 0
        assert "Ethereum Validator Score: 77.37" in result.stdout
        assert "Score Breakdown" in result.stdout
        assert "Uptime" in result.stdout
        assert "Balance growth" in result.stdout
        assert "95.00" in result.stdout
        assert "38.00" in result.stdout

    def test_json(self) -> None:
        result = runner.invoke(app, ["--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["score"] == pytest.approx(77.3729, abs=1e-4)
        assert data["breakdown"]["uptime"] == pytest.approx(95.0)
        assert data["contributions"]["balance_growth"] == pytest.approx(0.00625)
        assert data["is_finite"] is True

    def test_json_non_finite(self) -> None:
        result = runner.invoke(app, ["--json", "--blocks-proposed", "0"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["breakdown"]["proposal_inclusion"] == math.inf
        assert data["is_finite"] is False

    @patch("evscore.cli.EvaluatorRegistry")
    def test_unexpected_error(self, mock_registry: MagicMock) -> None:
        mock_registry.return_value.evaluate_validator.side_effect = RuntimeError("boom")
        result = runner.invoke(app, [])
        assert result.exit_code == 1
        assert "Error:" in result.stdout
        assert "boom" in result.stdout
