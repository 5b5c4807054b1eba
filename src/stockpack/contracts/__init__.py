"""Contracts module - protocols shared across layers.

By depending on protocols rather than concrete implementations, the
packing engine stays independent of how containers are provisioned.
"""

# DTOs
from .dtos import (
    ContainerLayout as ContainerLayout,
    PackingOutput as PackingOutput,
    PlacementRecord as PlacementRecord,
)

# Service protocols
from .protocols import (
    ContainerProvisionerProtocol as ContainerProvisionerProtocol,
)

__all__ = [
    "ContainerLayout",
    "ContainerProvisionerProtocol",
    "PackingOutput",
    "PlacementRecord",
]
