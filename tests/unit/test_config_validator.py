"""Unit tests for job-level validation."""

from __future__ import annotations

from typing import Any

from stockpack.application.config import (
    ValidationResult,
    load_config_from_dict,
    validate_config,
)
from stockpack.application.config.validator import LARGE_BACKLOG_THRESHOLD


class TestValidationResult:
    """Tests for ValidationResult exit codes."""

    def test_clean_result(self) -> None:
        result = ValidationResult()

        assert result.is_valid
        assert not result.has_warnings
        assert result.exit_code == 0

    def test_warnings_only(self) -> None:
        result = ValidationResult().add_warning("pieces", "many pieces")

        assert result.is_valid
        assert result.exit_code == 2

    def test_errors_win_over_warnings(self) -> None:
        result = ValidationResult().add_warning("a", "w").add_error("b", "e", 3)

        assert not result.is_valid
        assert result.exit_code == 1
        assert result.errors[0].value == 3


class TestValidateConfig:
    """Tests for validate_config."""

    def test_valid_job_has_no_findings(self, job_data: dict[str, Any]) -> None:
        result = validate_config(load_config_from_dict(job_data))

        assert result.exit_code == 0

    def test_piece_wider_than_container(self, job_data: dict[str, Any]) -> None:
        job_data["pieces"][0]["width"] = 12

        result = validate_config(load_config_from_dict(job_data))

        assert not result.is_valid
        assert result.errors[0].path == "pieces[0].width"
        assert "wider" in result.errors[0].message
        assert result.errors[0].value == 12

    def test_piece_taller_than_container(self, job_data: dict[str, Any]) -> None:
        job_data["pieces"][2]["height"] = 10.5

        result = validate_config(load_config_from_dict(job_data))

        assert [e.path for e in result.errors] == ["pieces[2].height"]

    def test_piece_as_large_as_container_is_valid(
        self, job_data: dict[str, Any]
    ) -> None:
        job_data["pieces"].append({"width": 10, "height": 10})

        result = validate_config(load_config_from_dict(job_data))

        assert result.is_valid

    def test_large_backlog_warning(self, job_data: dict[str, Any]) -> None:
        job_data["pieces"][2]["quantity"] = LARGE_BACKLOG_THRESHOLD

        result = validate_config(load_config_from_dict(job_data))

        assert result.is_valid
        assert [w.path for w in result.warnings] == ["pieces"]
        assert result.warnings[0].suggestion is not None

    def test_zero_initial_capacity_warning(self, job_data: dict[str, Any]) -> None:
        job_data["initial_capacity"] = 0

        result = validate_config(load_config_from_dict(job_data))

        assert result.exit_code == 2
        assert result.warnings[0].path == "initial_capacity"
