"""Unit tests for packing domain entities.

Tests cover:
- Piece validation, bounds and movement
- Container area bookkeeping, put/remove and overflow
- Distances to the bottom and left bounds
- Deep copies of containers
"""

from __future__ import annotations

import pytest

from stockpack.domain.entities import Container, Piece
from stockpack.domain.exceptions import ContainerOverflowError, PieceNotPlacedError
from stockpack.domain.value_objects import Direction, PackingPolicy


class TestPiece:
    """Tests for Piece."""

    def test_bounds_follow_y_up_convention(self) -> None:
        piece = Piece(width=4, height=3, x=1, y=2)

        assert piece.left == 1
        assert piece.right == 5
        assert piece.bottom == 2
        assert piece.top == 5
        assert piece.area == 12

    @pytest.mark.parametrize("width,height", [(0, 1), (1, 0), (-2, 3)])
    def test_rejects_non_positive_dimensions(self, width: float, height: float) -> None:
        with pytest.raises(ValueError, match="must be positive"):
            Piece(width=width, height=height)

    def test_move_distance_in_each_direction(self) -> None:
        piece = Piece(width=1, height=1, x=5, y=5)

        piece.move_distance(2, Direction.UP)
        assert (piece.x, piece.y) == (5, 7)
        piece.move_distance(3, Direction.DOWN)
        assert (piece.x, piece.y) == (5, 4)
        piece.move_distance(1, Direction.RIGHT)
        assert (piece.x, piece.y) == (6, 4)
        piece.move_distance(6, Direction.LEFT)
        assert (piece.x, piece.y) == (0, 4)

    def test_overlap_requires_shared_interior(self) -> None:
        a = Piece(width=2, height=2, x=0, y=0)
        touching = Piece(width=2, height=2, x=2, y=0)
        overlapping = Piece(width=2, height=2, x=1, y=1)

        assert not a.overlaps(touching)
        assert a.overlaps(overlapping)
        assert overlapping.overlaps(a)

    def test_pieces_compare_by_identity(self) -> None:
        """Two pieces of the same size are still different pieces."""
        a = Piece(width=2, height=2)
        b = Piece(width=2, height=2)

        assert a != b
        assert a == a

    def test_copy_is_independent(self) -> None:
        original = Piece(width=2, height=3, x=1, y=1, label="A")
        clone = original.copy()

        clone.move_to(5, 5)

        assert clone is not original
        assert clone.label == "A"
        assert (original.x, original.y) == (1, 1)


class TestContainer:
    """Tests for Container bookkeeping."""

    def test_empty_container_areas(self, container: Container) -> None:
        assert container.area == 100
        assert container.used_area == 0
        assert container.free_area == 100
        assert container.waste_percentage == 100
        assert container.piece_count == 0

    def test_put_piece_updates_areas(self, container: Container) -> None:
        piece = Piece(width=5, height=4)

        container.put_piece(piece)

        assert container.used_area == 20
        assert container.free_area == 80
        assert container.contains(piece)
        assert container.used_area + container.free_area == container.area

    def test_put_piece_rejects_overflow(self) -> None:
        container = Container(width=2, height=2)
        container.put_piece(Piece(width=2, height=1))

        with pytest.raises(ContainerOverflowError):
            container.put_piece(Piece(width=2, height=2))

    def test_put_piece_accepts_exact_fill(self) -> None:
        container = Container(width=3, height=3)
        container.put_piece(Piece(width=3, height=3))

        assert container.free_area == 0

    def test_remove_piece_restores_areas_exactly(self, container: Container) -> None:
        first = Piece(width=0.3, height=0.7)
        second = Piece(width=1.1, height=2.9)
        container.put_piece(first)
        before = container.free_area

        container.put_piece(second)
        container.remove_piece(second)

        assert container.free_area == before
        assert not container.contains(second)

    def test_remove_unplaced_piece_raises(self, container: Container) -> None:
        with pytest.raises(PieceNotPlacedError):
            container.remove_piece(Piece(width=1, height=1))

    def test_contains_is_by_identity(self, container: Container) -> None:
        container.put_piece(Piece(width=1, height=1))

        assert not container.contains(Piece(width=1, height=1))

    def test_rejects_negative_index(self) -> None:
        with pytest.raises(ValueError, match="index"):
            Container(width=1, height=1, index=-1)


class TestDistances:
    """Tests for distance_to_bottom_bound and distance_to_left_bound."""

    def test_empty_container_distances_reach_walls(self, container: Container) -> None:
        piece = Piece(width=2, height=2, x=3, y=4)

        assert container.distance_to_bottom_bound(piece) == 4
        assert container.distance_to_left_bound(piece) == 3

    def test_obstacle_below_limits_drop(self, container: Container) -> None:
        container.put_piece(Piece(width=4, height=3, x=0, y=0))
        piece = Piece(width=2, height=2, x=1, y=7)

        assert container.distance_to_bottom_bound(piece) == 4

    def test_obstacle_beside_does_not_limit_drop(self, container: Container) -> None:
        """An obstacle sharing only an edge column does not block."""
        container.put_piece(Piece(width=4, height=3, x=0, y=0))
        piece = Piece(width=2, height=2, x=4, y=7)

        assert container.distance_to_bottom_bound(piece) == 7

    def test_obstacle_left_limits_slide(self, container: Container) -> None:
        container.put_piece(Piece(width=3, height=5, x=0, y=0))
        piece = Piece(width=2, height=2, x=6, y=1)

        assert container.distance_to_left_bound(piece) == 3

    def test_piece_itself_is_not_an_obstacle(self, container: Container) -> None:
        piece = Piece(width=2, height=2, x=0, y=4)
        container.put_piece(piece)

        assert container.distance_to_bottom_bound(piece) == 4

    def test_resting_piece_has_zero_distance(self, container: Container) -> None:
        container.put_piece(Piece(width=10, height=2, x=0, y=0))
        piece = Piece(width=2, height=2, x=0, y=2)

        assert container.distance_to_bottom_bound(piece) == 0
        assert container.distance_to_left_bound(piece) == 0

    def test_rounding_overshoot_still_blocks_slide(
        self, container: Container
    ) -> None:
        """A piece a rounding error past its neighbour stays blocked by it."""
        container.put_piece(Piece(width=0.1, height=1, x=0, y=0))
        piece = Piece(width=0.2, height=1, x=0.09999999999999998, y=0)

        assert container.wall_left_of(piece) == 0.1
        assert container.distance_to_left_bound(piece) == 0
        assert not container.overlaps_any(piece)

    def test_rounding_overshoot_still_blocks_drop(
        self, container: Container
    ) -> None:
        container.put_piece(Piece(width=1, height=0.3, x=0, y=0))
        piece = Piece(width=1, height=1, x=0, y=0.29999999999999993)

        assert container.floor_below(piece) == 0.3
        assert container.distance_to_bottom_bound(piece) == 0

    def test_bounds_allow_rounding_at_edges(self) -> None:
        container = Container(width=1, height=1)
        piece = Piece(width=0.7, height=0.7, x=0.1 + 0.2, y=0.3)

        assert container.is_within_bounds(piece)


class TestContainerCopy:
    """Tests for Container.get_copy."""

    def test_copy_has_independent_pieces(self, container: Container) -> None:
        piece = Piece(width=2, height=2, x=1, y=1, label="A")
        container.put_piece(piece)

        clone = container.get_copy()
        clone.pieces[0].move_to(5, 5)
        clone.put_piece(Piece(width=1, height=1))

        assert clone is not container
        assert clone.pieces[0] is not piece
        assert (piece.x, piece.y) == (1, 1)
        assert container.piece_count == 1
        assert clone.used_area == 5

    def test_copy_keeps_bounds_and_index(self) -> None:
        container = Container(width=4, height=6, x=12, y=0, index=3)

        clone = container.get_copy()

        assert (clone.x, clone.y, clone.width, clone.height, clone.index) == (
            12,
            0,
            4,
            6,
            3,
        )


class TestPackingPolicy:
    """Tests for PackingPolicy."""

    def test_waste_increment_divides_reference_area(self) -> None:
        assert PackingPolicy().waste_increment(200) == 10
        assert PackingPolicy(waste_divisor=4).waste_increment(200) == 50

    def test_rejects_non_positive_divisor(self) -> None:
        with pytest.raises(ValueError, match="divisor"):
            PackingPolicy(waste_divisor=0)
