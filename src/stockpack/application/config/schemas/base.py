"""Base enums and shared models for packing job configuration schemas.

Policy enums are imported from the domain layer and aliased here, so a
JSON value such as ``"all"`` validates straight into the domain enum.
"""

from enum import Enum

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
)

from stockpack.domain.value_objects import (
    AfterGroupFit,
    ContainerScan,
    WasteReference,
)

# Supported schema versions for job files
# Version 1.0: Initial schema with container, pieces and DJD policies
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

ContainerScanConfig = ContainerScan
AfterGroupFitConfig = AfterGroupFit
WasteReferenceConfig = WasteReference


class OutputFormat(str, Enum):
    """Report format written by the pack command."""

    TEXT = "text"
    JSON = "json"


class ContainerConfig(BaseModel):
    """Dimensions of the containers opened during a run.

    Attributes:
        width: Container width (positive).
        height: Container height (positive).
        gap: Horizontal spacing between consecutive containers.
    """

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    gap: float = Field(default=0.0, ge=0)


class PieceConfig(BaseModel):
    """A rectangular piece type to pack.

    Attributes:
        width: Piece width (positive).
        height: Piece height (positive).
        quantity: Number of identical pieces (1 to 10000).
        label: Optional label; generated from the list position if empty.
    """

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    quantity: int = Field(default=1, ge=1, le=10000)
    label: str = ""


class PolicyConfig(BaseModel):
    """DJD step policies.

    Attributes:
        container_scan: "last" inspects only the newest container, "all"
            every open container.
        after_group_fit: "stop" ends a step after a group fits, "continue"
            moves on to the next scanned container.
        waste_reference: "first_container" or "per_container" area as the
            base of the waste increment.
        waste_divisor: The waste budget grows by reference area / divisor.
    """

    model_config = ConfigDict(extra="forbid")

    container_scan: ContainerScanConfig = ContainerScanConfig.LAST
    after_group_fit: AfterGroupFitConfig = AfterGroupFitConfig.STOP
    waste_reference: WasteReferenceConfig = WasteReferenceConfig.FIRST_CONTAINER
    waste_divisor: int = Field(default=20, ge=1, le=1000)


class OutputConfig(BaseModel):
    """Output options for the pack command.

    Attributes:
        format: Report format (text or json).
        svg_dir: Directory to write one SVG cut diagram per container.
    """

    model_config = ConfigDict(extra="forbid")

    format: OutputFormat = OutputFormat.TEXT
    svg_dir: str | None = None
