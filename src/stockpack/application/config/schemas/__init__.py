"""Pydantic schemas for packing job files."""

from stockpack.application.config.schemas.base import (
    SUPPORTED_VERSIONS,
    AfterGroupFitConfig,
    ContainerConfig,
    ContainerScanConfig,
    OutputConfig,
    OutputFormat,
    PieceConfig,
    PolicyConfig,
    WasteReferenceConfig,
)
from stockpack.application.config.schemas.root import PackingJobConfiguration

__all__ = [
    "SUPPORTED_VERSIONS",
    "AfterGroupFitConfig",
    "ContainerConfig",
    "ContainerScanConfig",
    "OutputConfig",
    "OutputFormat",
    "PackingJobConfiguration",
    "PieceConfig",
    "PolicyConfig",
    "WasteReferenceConfig",
]
