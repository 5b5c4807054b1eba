"""Waste-bounded search for groups of one, two or three pieces.

Given a backlog sorted by area (largest first) and a container, these
functions look for the smallest group of pieces that fits together while
leaving at most ``max_waste`` free area. Groups of one are tried first,
then two, then three: priority goes by group size, not by waste.

Multi-piece groups are tried speculatively. Copies of the candidate
pieces are placed on a scratch copy of the container so trials can
interact geometrically without touching the real container or the
backlog. Only a complete group is committed, by re-running
bottom-left-fill against the real container in the same order.

All pruning bounds rely on the descending sort: once a candidate wastes
too much, every later (smaller) candidate wastes even more.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from stockpack.domain.entities import Container, Piece
from stockpack.domain.exceptions import PackingInvariantError, UnsortedBacklogError
from stockpack.domain.piece_list import PieceList
from stockpack.domain.services.bottom_left_fill import try_place_in_bottom_left
from stockpack.domain.value_objects import SortOrder

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FitResult:
    """Outcome of a group search.

    Truthy when a group was committed, so it can be used as a boolean.

    Attributes:
        pieces: Committed pieces, in placement order. Empty on no fit.
        max_waste: Waste budget the group was found under.
    """

    pieces: tuple[Piece, ...] = ()
    max_waste: float = 0

    def __bool__(self) -> bool:
        return bool(self.pieces)

    @property
    def size(self) -> int:
        return len(self.pieces)

    @property
    def combined_area(self) -> float:
        return sum(piece.area for piece in self.pieces)


NO_FIT = FitResult()


def try_fit_pieces(
    pieces: PieceList,
    container: Container,
    max_waste: float,
) -> FitResult:
    """Fit one, two or three pieces into a container within a waste budget.

    Args:
        pieces: Backlog sorted by area, largest first. Committed pieces are
            removed from it.
        container: Container receiving the group.
        max_waste: Largest free area the container may be left with.

    Returns:
        The committed group, or ``NO_FIT`` if no group of up to three
        pieces fits at this budget.

    Raises:
        UnsortedBacklogError: If the backlog is not sorted descending.
    """
    if not pieces.is_sorted(SortOrder.DESCENDING):
        raise UnsortedBacklogError(
            "Group search requires pieces sorted by descending area"
        )

    result = try_fit_one_piece(pieces, container, max_waste)
    if result:
        return result

    if len(pieces) > 1:
        result = try_fit_two_pieces(pieces, container, max_waste)
        if result:
            return result

    if len(pieces) > 2:
        result = try_fit_three_pieces(pieces, container, max_waste)
        if result:
            return result

    return NO_FIT


def try_fit_one_piece(
    pieces: PieceList,
    container: Container,
    max_waste: float,
) -> FitResult:
    """Place the largest single piece that leaves at most ``max_waste``."""
    for piece in pieces:
        if container.free_area - piece.area > max_waste:
            break

        if try_place_in_bottom_left(container, piece):
            container.put_piece(piece)
            pieces.remove(piece)
            logger.info(
                "Placed '%s' alone in container %d (max waste %s)",
                piece.label,
                container.index,
                max_waste,
            )
            return FitResult(pieces=(piece,), max_waste=max_waste)

    return NO_FIT


def try_fit_two_pieces(
    pieces: PieceList,
    container: Container,
    max_waste: float,
) -> FitResult:
    """Place a pair of pieces that together leave at most ``max_waste``.

    Requires at least two pieces in the backlog.
    """
    largest = pieces[0].area
    second_largest = pieces[1].area
    smallest = pieces[-1].area

    if container.free_area - largest - second_largest > max_waste:
        logger.debug(
            "Container %d: two largest pieces exceed waste %s",
            container.index,
            max_waste,
        )
        return NO_FIT

    scratch = container.get_copy()
    for i, candidate_i in enumerate(pieces):
        if scratch.free_area - candidate_i.area - largest > max_waste:
            break
        if candidate_i.area + smallest > scratch.free_area:
            continue

        trial_i = _place_speculatively(scratch, candidate_i)
        if trial_i is None:
            continue

        for j, candidate_j in enumerate(pieces):
            if j == i:
                continue
            if scratch.free_area - candidate_j.area > max_waste:
                break
            if scratch.free_area < candidate_j.area:
                continue

            if _place_speculatively(scratch, candidate_j) is not None:
                return _commit(pieces, container, (candidate_i, candidate_j), max_waste)

        scratch.remove_piece(trial_i)

    return NO_FIT


def try_fit_three_pieces(
    pieces: PieceList,
    container: Container,
    max_waste: float,
) -> FitResult:
    """Place three pieces that together leave at most ``max_waste``.

    Requires at least three pieces in the backlog.
    """
    largest = pieces[0].area
    second_largest = pieces[1].area
    third_largest = pieces[2].area
    smallest = pieces[-1].area
    second_smallest = pieces[-2].area

    if container.free_area - largest - second_largest - third_largest > max_waste:
        logger.debug(
            "Container %d: three largest pieces exceed waste %s",
            container.index,
            max_waste,
        )
        return NO_FIT

    scratch = container.get_copy()
    for i, candidate_i in enumerate(pieces):
        if (
            scratch.free_area - candidate_i.area - largest - second_largest
            > max_waste
        ):
            break
        if scratch.free_area < candidate_i.area + smallest + second_smallest:
            continue

        trial_i = _place_speculatively(scratch, candidate_i)
        if trial_i is None:
            continue

        for j, candidate_j in enumerate(pieces):
            if j == i:
                continue
            if scratch.free_area - candidate_j.area - largest > max_waste:
                break
            if scratch.free_area < candidate_j.area + smallest:
                continue

            trial_j = _place_speculatively(scratch, candidate_j)
            if trial_j is None:
                continue

            for k, candidate_k in enumerate(pieces):
                if k == i or k == j:
                    continue
                if scratch.free_area - candidate_k.area > max_waste:
                    break
                if scratch.free_area < candidate_k.area:
                    continue

                if _place_speculatively(scratch, candidate_k) is not None:
                    return _commit(
                        pieces,
                        container,
                        (candidate_i, candidate_j, candidate_k),
                        max_waste,
                    )

            scratch.remove_piece(trial_j)

        scratch.remove_piece(trial_i)

    return NO_FIT


def _place_speculatively(scratch: Container, piece: Piece) -> Piece | None:
    """Try a copy of the piece on the scratch container.

    Returns:
        The placed copy (to roll back later), or None if it does not fit.
    """
    trial = piece.copy()
    if try_place_in_bottom_left(scratch, trial):
        scratch.put_piece(trial)
        return trial
    return None


def _commit(
    pieces: PieceList,
    container: Container,
    group: tuple[Piece, ...],
    max_waste: float,
) -> FitResult:
    """Place a speculatively confirmed group in the real container."""
    for piece in group:
        if not try_place_in_bottom_left(container, piece):
            raise PackingInvariantError(
                f"Piece '{piece.label}' fitted speculatively but not in "
                f"container {container.index}",
                piece=piece,
                container=container,
            )
        container.put_piece(piece)

    for piece in group:
        pieces.remove(piece)

    logger.info(
        "Placed %d pieces (%s) in container %d (max waste %s)",
        len(group),
        ", ".join(piece.label for piece in group),
        container.index,
        max_waste,
    )
    return FitResult(pieces=group, max_waste=max_waste)
