"""Integration tests for the validate CLI command.

These tests verify the validate command works correctly end-to-end,
including:
- Valid job files pass validation
- Invalid job files produce errors
- Advisory warnings are displayed
- Exit codes are correct
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from stockpack.cli.main import app

# Get path to test fixtures
FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_minimal_job(self, runner: CliRunner) -> None:
        """Valid minimal job should pass with exit code 0."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "valid_minimal.json")])

        assert result.exit_code == 0
        assert "Validation passed. Job is valid." in result.output

    def test_valid_full_job(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "valid_full.json")])

        assert result.exit_code == 0

    def test_file_not_found(self, runner: CliRunner) -> None:
        """Non-existent file should fail with exit code 1."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "nonexistent.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_invalid_json_syntax(self, runner: CliRunner) -> None:
        """Invalid JSON should fail with exit code 1 and a line number."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "invalid_json.json")])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Line 6" in result.output
        assert "Validation failed" in result.output

    def test_schema_errors_listed_by_path(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "invalid_schema.json")])

        assert result.exit_code == 1
        assert "container.height" in result.output
        assert "pieces[0].quantity" in result.output

    def test_unknown_field_rejected(self, runner: CliRunner) -> None:
        """Unknown fields should cause validation failure."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "unknown_field.json")])

        assert result.exit_code == 1
        assert "allow_rotation" in result.output

    def test_oversize_piece_is_error(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "oversize_piece.json")])

        assert result.exit_code == 1
        assert "pieces[1].width" in result.output
        assert "wider than the container" in result.output
        assert "Validation failed: 1 error(s), 0 warning(s)" in result.output

    def test_valid_job_with_warnings(self, runner: CliRunner) -> None:
        """Valid job with advisories should have exit code 2."""
        result = runner.invoke(
            app, ["validate", str(FIXTURES_PATH / "valid_with_warnings.json")]
        )

        assert result.exit_code == 2
        assert "Warnings:" in result.output
        assert "initial_capacity" in result.output
        assert "Validation passed with 1 warning(s)" in result.output
