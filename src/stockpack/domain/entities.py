"""Domain entities for 2D rectangle packing.

Coordinates use a y-up convention: a rectangle at ``(x, y)`` spans
``[x, x + width]`` horizontally and ``[y, y + height]`` vertically, so its
bottom bound is ``y`` and its top bound is ``y + height``.

Pieces and containers are mutable. Speculative placements work on copies
obtained from :meth:`Piece.copy` and :meth:`Container.get_copy`.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .exceptions import ContainerOverflowError, PieceNotPlacedError
from .value_objects import Direction

# Slack for float rounding when comparing a piece area with free area.
AREA_TOLERANCE = 1e-9

# Edges closer than this are treated as touching.
GEOMETRY_TOLERANCE = 1e-9


def _spans_overlap(a_low: float, a_high: float, b_low: float, b_high: float) -> bool:
    """Check whether two open intervals share more than GEOMETRY_TOLERANCE."""
    return (
        a_low < b_high - GEOMETRY_TOLERANCE
        and b_low < a_high - GEOMETRY_TOLERANCE
    )


@dataclass(eq=False)
class Piece:
    """A rectangular piece with fixed size and mutable position.

    Pieces compare by identity: two pieces with the same dimensions are
    still distinct physical pieces.

    Attributes:
        width: Horizontal size.
        height: Vertical size.
        x: Left bound.
        y: Bottom bound.
        label: Human readable identifier used in reports.
    """

    width: float
    height: float
    x: float = 0
    y: float = 0
    label: str = ""

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError("Piece width must be positive")
        if self.height <= 0:
            raise ValueError("Piece height must be positive")

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y

    @property
    def top(self) -> float:
        return self.y + self.height

    def move_distance(self, distance: float, direction: Direction) -> None:
        """Translate the piece along a direction.

        No legality checks are made; callers validate the resulting
        position against container bounds.
        """
        if direction is Direction.UP:
            self.y += distance
        elif direction is Direction.DOWN:
            self.y -= distance
        elif direction is Direction.RIGHT:
            self.x += distance
        elif direction is Direction.LEFT:
            self.x -= distance

    def move_to(self, x: float, y: float) -> None:
        """Place the piece's bottom-left corner at ``(x, y)``."""
        self.x = x
        self.y = y

    def overlaps(self, other: Piece) -> bool:
        """Check whether two pieces share interior area (touching is fine)."""
        return _spans_overlap(
            self.left, self.right, other.left, other.right
        ) and _spans_overlap(self.bottom, self.top, other.bottom, other.top)

    def copy(self) -> Piece:
        return Piece(
            width=self.width,
            height=self.height,
            x=self.x,
            y=self.y,
            label=self.label,
        )


@dataclass(eq=False)
class Container:
    """A rectangular container holding placed pieces.

    The container tracks its placed pieces in insertion order. Area
    bookkeeping is derived from that set so removing a piece exactly
    reverses putting it.

    Attributes:
        width: Horizontal size.
        height: Vertical size.
        x: Left bound of the container origin.
        y: Bottom bound of the container origin.
        index: Zero-based position of the container in a packing run.
        pieces: Placed pieces, in placement order.
    """

    width: float
    height: float
    x: float = 0
    y: float = 0
    index: int = 0
    pieces: list[Piece] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError("Container width must be positive")
        if self.height <= 0:
            raise ValueError("Container height must be positive")
        if self.index < 0:
            raise ValueError("Container index must be non-negative")

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y

    @property
    def top(self) -> float:
        return self.y + self.height

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def used_area(self) -> float:
        """Sum of the areas of placed pieces."""
        return sum(piece.area for piece in self.pieces)

    @property
    def free_area(self) -> float:
        return self.area - self.used_area

    @property
    def waste_percentage(self) -> float:
        """Percentage of the container area not covered by pieces."""
        return self.free_area / self.area * 100

    @property
    def piece_count(self) -> int:
        return len(self.pieces)

    def contains(self, piece: Piece) -> bool:
        """Check whether this exact piece object is placed here."""
        return any(placed is piece for placed in self.pieces)

    def put_piece(self, piece: Piece) -> None:
        """Add a piece to the placed set.

        Raises:
            ContainerOverflowError: If the piece area exceeds the free area.
        """
        if piece.area - self.free_area > AREA_TOLERANCE:
            raise ContainerOverflowError(piece, self)
        self.pieces.append(piece)

    def remove_piece(self, piece: Piece) -> None:
        """Remove a previously put piece, restoring the area bookkeeping.

        Raises:
            PieceNotPlacedError: If the piece is not placed here.
        """
        for i, placed in enumerate(self.pieces):
            if placed is piece:
                del self.pieces[i]
                return
        raise PieceNotPlacedError(piece, self)

    def floor_below(self, piece: Piece) -> float:
        """Height the piece's bottom edge would rest at if dropped.

        Only placed pieces that share a horizontal span with the piece and
        lie below it (within GEOMETRY_TOLERANCE) can obstruct it.
        """
        floor = self.bottom
        for other in self.pieces:
            if other is piece:
                continue
            if other.top <= piece.bottom + GEOMETRY_TOLERANCE and _spans_overlap(
                other.left, other.right, piece.left, piece.right
            ):
                floor = max(floor, other.top)
        return floor

    def wall_left_of(self, piece: Piece) -> float:
        """Position the piece's left edge would rest at if slid left."""
        wall = self.left
        for other in self.pieces:
            if other is piece:
                continue
            if other.right <= piece.left + GEOMETRY_TOLERANCE and _spans_overlap(
                other.bottom, other.top, piece.bottom, piece.top
            ):
                wall = max(wall, other.right)
        return wall

    def distance_to_bottom_bound(self, piece: Piece) -> float:
        """Distance the piece can drop before touching the floor or a piece.

        Returns:
            Non-negative distance; 0 if the piece already rests on something.
        """
        return max(0, piece.bottom - self.floor_below(piece))

    def distance_to_left_bound(self, piece: Piece) -> float:
        """Distance the piece can slide left before touching a wall or a piece.

        Returns:
            Non-negative distance; 0 if the piece is already blocked.
        """
        return max(0, piece.left - self.wall_left_of(piece))

    def is_within_bounds(self, piece: Piece) -> bool:
        """Check whether the piece lies inside the container, up to rounding."""
        return (
            piece.left >= self.left - GEOMETRY_TOLERANCE
            and piece.right <= self.right + GEOMETRY_TOLERANCE
            and piece.bottom >= self.bottom - GEOMETRY_TOLERANCE
            and piece.top <= self.top + GEOMETRY_TOLERANCE
        )

    def overlaps_any(self, piece: Piece) -> bool:
        """Check whether the piece overlaps any other placed piece."""
        return any(
            other is not piece and other.overlaps(piece) for other in self.pieces
        )

    def get_copy(self) -> Container:
        """Deep copy: same bounds, independent copies of every placed piece."""
        return Container(
            width=self.width,
            height=self.height,
            x=self.x,
            y=self.y,
            index=self.index,
            pieces=[piece.copy() for piece in self.pieces],
        )
