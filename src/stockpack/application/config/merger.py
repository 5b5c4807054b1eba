"""Merge CLI overrides into a loaded job configuration.

Precedence: CLI args > job file values > defaults. Only non-None CLI
arguments override job file values.
"""

from typing import Any

from stockpack.application.config.loader import load_config_from_dict
from stockpack.application.config.schemas import (
    OutputFormat,
    PackingJobConfiguration,
)
from stockpack.domain.value_objects import AfterGroupFit, ContainerScan


def merge_config_with_cli(
    config: PackingJobConfiguration,
    *,
    container_scan: ContainerScan | str | None = None,
    after_group_fit: AfterGroupFit | str | None = None,
    initial_capacity: float | None = None,
    output_format: OutputFormat | str | None = None,
    svg_dir: str | None = None,
) -> PackingJobConfiguration:
    """Return a new configuration with CLI overrides applied.

    The merged data is re-validated, so an out-of-range override raises
    ConfigError just like a bad job file would.

    Example:
        >>> merged = merge_config_with_cli(config, container_scan="all")
        >>> merged.policy.container_scan
        <ContainerScan.ALL: 'all'>
    """
    data: dict[str, Any] = config.model_dump(mode="json")

    if container_scan is not None:
        data["policy"]["container_scan"] = _value(container_scan)
    if after_group_fit is not None:
        data["policy"]["after_group_fit"] = _value(after_group_fit)
    if initial_capacity is not None:
        data["initial_capacity"] = initial_capacity
    if output_format is not None:
        data["output"]["format"] = _value(output_format)
    if svg_dir is not None:
        data["output"]["svg_dir"] = svg_dir

    return load_config_from_dict(data)


def _value(option: Any) -> Any:
    return getattr(option, "value", option)
