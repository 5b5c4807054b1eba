"""Unit tests for job file loading and ConfigError reporting."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from stockpack.application.config import (
    ConfigError,
    load_config,
    load_config_from_dict,
)


class TestLoadConfig:
    """Tests for load_config."""

    def test_loads_valid_file(self, tmp_path: Path, job_data: dict[str, Any]) -> None:
        path = tmp_path / "job.json"
        path.write_text(json.dumps(job_data))

        config = load_config(path)

        assert config.container.width == 10
        assert len(config.pieces) == 3

    def test_missing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "missing.json"

        with pytest.raises(ConfigError) as exc_info:
            load_config(path)

        assert exc_info.value.error_type == "file_not_found"
        assert exc_info.value.path == path
        assert "Job file not found" in str(exc_info.value)

    def test_invalid_json_reports_position(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text('{\n  "schema_version": "1.0",\n  "container": {\n}')

        with pytest.raises(ConfigError) as exc_info:
            load_config(path)

        error = exc_info.value
        assert error.error_type == "json_parse"
        assert error.details[0]["line"] == 4
        assert "column" in error.details[0]

    def test_validation_error_has_json_paths(
        self, tmp_path: Path, job_data: dict[str, Any]
    ) -> None:
        job_data["pieces"][1]["height"] = -5
        path = tmp_path / "job.json"
        path.write_text(json.dumps(job_data))

        with pytest.raises(ConfigError) as exc_info:
            load_config(path)

        error = exc_info.value
        assert error.error_type == "validation"
        assert error.path == path
        assert [d["path"] for d in error.details] == ["pieces[1].height"]
        assert error.details[0]["value"] == -5
        assert str(error).startswith("Job configuration validation failed:")


class TestLoadConfigFromDict:
    """Tests for load_config_from_dict."""

    def test_valid_dict(self, job_data: dict[str, Any]) -> None:
        config = load_config_from_dict(job_data)

        assert config.schema_version == "1.0"

    def test_missing_section(self, job_data: dict[str, Any]) -> None:
        del job_data["container"]

        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(job_data)

        assert exc_info.value.path is None
        assert any(d["path"] == "container" for d in exc_info.value.details)

    def test_non_object_root(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict([1, 2, 3])  # type: ignore[arg-type]

        assert exc_info.value.error_type == "validation"
