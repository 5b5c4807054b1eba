"""Bottom-left-fill stabilisation.

A piece is dropped from just outside the container's top-right corner and
pushed alternately down and left until neither move is possible. Moving
left can open room below and vice versa, so a single down-then-left pass
is not enough; the loop runs to a fixed point.
"""

from __future__ import annotations

import logging

from stockpack.domain.entities import GEOMETRY_TOLERANCE, Container, Piece
from stockpack.domain.value_objects import Direction

logger = logging.getLogger(__name__)


def try_place_in_bottom_left(container: Container, piece: Piece) -> bool:
    """Place a piece at the lowest, then leftmost, stable position.

    The piece is first moved so its right edge lines up with the
    container's right edge and its bottom edge sits on the container's top
    edge, a collision-free starting point regardless of where it was.

    Args:
        container: Container whose bounds and placed pieces constrain the
            piece. It is not modified.
        piece: Piece to position. Not added to the container.

    Returns:
        True if the piece settled inside the container. On False the piece
        is left at the top-right starting point.
    """
    piece.move_distance(container.right - piece.right, Direction.RIGHT)
    piece.move_distance(container.top - piece.bottom, Direction.UP)
    return move_piece_to_lower_left(container, piece)


def move_piece_to_lower_left(container: Container, piece: Piece) -> bool:
    """Push a piece down and left until it reaches a stable position.

    Each move snaps the piece onto its floor or wall rather than
    subtracting a distance, so float rounding never leaves it a hair past
    an obstacle. If the stable position is not within the container, the
    piece returns to where it was when called.

    Returns:
        True if the piece moved and ended within bounds, False otherwise.
    """
    start_x, start_y = piece.x, piece.y
    total_down = 0
    total_left = 0

    while True:
        down = container.distance_to_bottom_bound(piece)
        if down > GEOMETRY_TOLERANCE:
            piece.move_to(piece.x, container.floor_below(piece))
            total_down += down
        else:
            down = 0

        left = container.distance_to_left_bound(piece)
        if left > GEOMETRY_TOLERANCE:
            piece.move_to(container.wall_left_of(piece), piece.y)
            total_left += left
        else:
            left = 0

        if not down and not left:
            break

    if not container.is_within_bounds(piece):
        piece.move_to(start_x, start_y)
        logger.debug(
            "Piece '%s' (%sx%s) does not fit in container %d",
            piece.label,
            piece.width,
            piece.height,
            container.index,
        )
        return False

    moved = total_down > 0 or total_left > 0
    if moved:
        logger.debug(
            "Piece '%s' settled at (%s, %s) in container %d",
            piece.label,
            piece.x,
            piece.y,
            container.index,
        )
    return moved
