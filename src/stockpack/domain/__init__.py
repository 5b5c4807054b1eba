"""Domain layer - packing entities, value objects and services."""

from .entities import Container, Piece
from .exceptions import (
    ContainerOverflowError,
    PackingError,
    PackingInvariantError,
    PieceNotPlacedError,
    UnsortedBacklogError,
)
from .piece_list import PieceList
from .value_objects import (
    AfterGroupFit,
    ContainerScan,
    Direction,
    PackingPolicy,
    PlacementPhase,
    SortOrder,
    WasteReference,
)

__all__ = [
    "AfterGroupFit",
    "Container",
    "ContainerOverflowError",
    "ContainerScan",
    "Direction",
    "PackingError",
    "PackingInvariantError",
    "PackingPolicy",
    "Piece",
    "PieceList",
    "PieceNotPlacedError",
    "PlacementPhase",
    "SortOrder",
    "UnsortedBacklogError",
    "WasteReference",
]
