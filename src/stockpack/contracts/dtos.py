"""Shared Data Transfer Objects for cross-layer communication.

Packing results are frozen snapshots of the mutable domain containers, so
formatters and exporters in the infrastructure layer can read them
without depending on the packing engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from stockpack.domain.entities import Container, Piece


@dataclass(frozen=True)
class PlacementRecord:
    """A piece placed in a container.

    Coordinates are relative to the container origin (bottom-left corner).

    Attributes:
        label: Piece label.
        x: Distance of the piece's left edge from the container's left edge.
        y: Distance of the piece's bottom edge from the container's bottom.
        width: Piece width.
        height: Piece height.
    """

    label: str
    x: float
    y: float
    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def right_edge(self) -> float:
        return self.x + self.width

    @property
    def top_edge(self) -> float:
        return self.y + self.height

    @classmethod
    def from_piece(cls, piece: Piece, container: Container) -> PlacementRecord:
        return cls(
            label=piece.label,
            x=piece.x - container.x,
            y=piece.y - container.y,
            width=piece.width,
            height=piece.height,
        )


@dataclass(frozen=True)
class ContainerLayout:
    """Layout of pieces in a single container.

    Attributes:
        index: Zero-based index of the container in the run.
        width: Container width.
        height: Container height.
        origin_x: Container left bound in run coordinates.
        origin_y: Container bottom bound in run coordinates.
        placements: Placed pieces, in placement order.
    """

    index: int
    width: float
    height: float
    origin_x: float
    origin_y: float
    placements: tuple[PlacementRecord, ...]

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def used_area(self) -> float:
        return sum(p.area for p in self.placements)

    @property
    def free_area(self) -> float:
        return self.area - self.used_area

    @property
    def waste_percentage(self) -> float:
        """Percentage of the container area left empty."""
        if self.area == 0:
            return 0.0
        return (1 - self.used_area / self.area) * 100

    @property
    def piece_count(self) -> int:
        return len(self.placements)

    @classmethod
    def from_container(cls, container: Container) -> ContainerLayout:
        return cls(
            index=container.index,
            width=container.width,
            height=container.height,
            origin_x=container.x,
            origin_y=container.y,
            placements=tuple(
                PlacementRecord.from_piece(piece, container)
                for piece in container.pieces
            ),
        )


@dataclass(frozen=True)
class PackingOutput:
    """Complete result of a packing run.

    Attributes:
        layouts: One layout per container, in opening order.
        steps: Number of DJD steps the run took.
        phase_counts: Number of commits per placement phase value.
        errors: Error messages if the run failed.
    """

    layouts: tuple[ContainerLayout, ...]
    steps: int = 0
    phase_counts: dict[str, int] = field(default_factory=dict)
    errors: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def total_containers(self) -> int:
        return len(self.layouts)

    @property
    def total_pieces_placed(self) -> int:
        return sum(layout.piece_count for layout in self.layouts)

    @property
    def total_waste_percentage(self) -> float:
        """Waste across all containers, weighted by container area."""
        total_area = sum(layout.area for layout in self.layouts)
        if total_area == 0:
            return 0.0
        total_used = sum(layout.used_area for layout in self.layouts)
        return (1 - total_used / total_area) * 100
