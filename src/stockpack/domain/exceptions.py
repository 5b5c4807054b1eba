"""Domain exceptions for the packing engine.

Geometric infeasibility is never an exception: a piece or group that
cannot be placed is reported as a ``False`` result so callers can try the
next candidate, container or waste budget. The exceptions below signal
broken invariants or misuse of the domain objects.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .entities import Container, Piece


class PackingError(Exception):
    """Base class for packing engine errors."""


class PackingInvariantError(PackingError):
    """Raised when a placement that must succeed does not.

    The usual cause is a piece larger than a freshly opened container, so
    the input is unplaceable and retrying with a larger waste budget or
    another container cannot help.

    Attributes:
        piece: The piece that could not be placed.
        container: The container that rejected it.
    """

    def __init__(
        self,
        message: str,
        piece: Piece | None = None,
        container: Container | None = None,
    ) -> None:
        self.message = message
        self.piece = piece
        self.container = container
        super().__init__(message)


class ContainerOverflowError(PackingError):
    """Raised when putting a piece would exceed a container's area."""

    def __init__(self, piece: Piece, container: Container) -> None:
        self.piece = piece
        self.container = container
        super().__init__(
            f"Piece '{piece.label}' (area {piece.area}) exceeds free area "
            f"{container.free_area} of container {container.index}"
        )


class PieceNotPlacedError(PackingError):
    """Raised when removing a piece that is not in the container."""

    def __init__(self, piece: Piece, container: Container) -> None:
        self.piece = piece
        self.container = container
        super().__init__(
            f"Piece '{piece.label}' is not placed in container {container.index}"
        )


class UnsortedBacklogError(PackingError):
    """Raised when group search receives a backlog not sorted by area."""
