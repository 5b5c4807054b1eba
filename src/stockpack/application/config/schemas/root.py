"""Root configuration schema for packing jobs."""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

from stockpack.application.config.schemas.base import (
    SUPPORTED_VERSIONS,
    ContainerConfig,
    OutputConfig,
    PieceConfig,
    PolicyConfig,
)


class PackingJobConfiguration(BaseModel):
    """Root configuration of a packing job file.

    Attributes:
        schema_version: Version of the job file format.
        container: Size of the containers to open.
        initial_capacity: Fill fraction below which a container takes a
            single piece without group search (0 disables the phase).
        policy: DJD step policies.
        pieces: Piece types to pack (at least one).
        output: Output options.
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    container: ContainerConfig
    initial_capacity: float = Field(default=0.25, ge=0, le=1)
    policy: PolicyConfig = Field(default_factory=PolicyConfig)
    pieces: list[PieceConfig] = Field(..., min_length=1)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_schema_version(cls, v: str) -> str:
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version '{v}'. Supported versions: {supported}"
            )
        return v

    @property
    def piece_count(self) -> int:
        """Number of individual pieces after expanding quantities."""
        return sum(piece.quantity for piece in self.pieces)
