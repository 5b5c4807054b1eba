"""Configuration schema and loading system for packing jobs.

Public API:
    - PackingJobConfiguration: Root job model
    - load_config / load_config_from_dict: Load and validate a job
    - ConfigError: Exception for job file errors
    - merge_config_with_cli: Apply CLI overrides
    - validate_config: Job-level checks returning a ValidationResult
    - config_to_pieces / config_to_policy: Convert to domain objects

Example:
    >>> from pathlib import Path
    >>> from stockpack.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("job.json"))
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from stockpack.application.config.adapter import config_to_pieces, config_to_policy
from stockpack.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from stockpack.application.config.merger import merge_config_with_cli
from stockpack.application.config.schemas import (
    SUPPORTED_VERSIONS,
    AfterGroupFitConfig,
    ContainerConfig,
    ContainerScanConfig,
    OutputConfig,
    OutputFormat,
    PackingJobConfiguration,
    PieceConfig,
    PolicyConfig,
    WasteReferenceConfig,
)
from stockpack.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "AfterGroupFitConfig",
    "ConfigError",
    "ContainerConfig",
    "ContainerScanConfig",
    "OutputConfig",
    "OutputFormat",
    "PackingJobConfiguration",
    "PieceConfig",
    "PolicyConfig",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "WasteReferenceConfig",
    "config_to_pieces",
    "config_to_policy",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
    "validate_config",
]
