"""DJD packing step and the packing loop built on it.

One DJD step makes a single packing decision:

1. Initial-capacity phase: a container filled below ``initial_capacity``
   of its area takes the largest piece that fits in it.
2. Waste-escalation phase: the tolerated waste grows from zero in fixed
   increments and group search looks for 1, 2 or 3 pieces that fit
   within it.
3. New-container phase: a new container is opened and the largest piece
   is placed in it. This must succeed; failure means the input cannot be
   packed at all.

Callers repeat steps until the backlog is empty; :class:`DJDPacker`
does that loop.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from stockpack.domain.entities import Container, Piece
from stockpack.domain.exceptions import PackingInvariantError
from stockpack.domain.piece_list import PieceList
from stockpack.domain.services.bottom_left_fill import try_place_in_bottom_left
from stockpack.domain.services.group_search import try_fit_pieces
from stockpack.domain.value_objects import (
    AfterGroupFit,
    ContainerScan,
    PackingPolicy,
    PlacementPhase,
    SortOrder,
    WasteReference,
)

if TYPE_CHECKING:
    from stockpack.contracts.protocols import ContainerProvisionerProtocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepPlacement:
    """Pieces committed to one container during a packing step.

    Attributes:
        phase: Phase of the step that committed the pieces.
        container_index: Index of the receiving container.
        pieces: Committed pieces, in placement order.
        max_waste: Waste budget of the group (waste-escalation phase only).
    """

    phase: PlacementPhase
    container_index: int
    pieces: tuple[Piece, ...]
    max_waste: float | None = None


@dataclass(frozen=True)
class PackingStep:
    """Result of one DJD step.

    Attributes:
        placements: Commits made during the step. More than one only under
            ``AfterGroupFit.CONTINUE``.
    """

    placements: tuple[StepPlacement, ...] = ()

    @property
    def phase(self) -> PlacementPhase:
        """Phase of the first commit, or NOTHING_TO_PLACE."""
        if not self.placements:
            return PlacementPhase.NOTHING_TO_PLACE
        return self.placements[0].phase

    @property
    def pieces_placed(self) -> tuple[Piece, ...]:
        return tuple(p for placement in self.placements for p in placement.pieces)

    @property
    def opened_container(self) -> bool:
        return self.phase is PlacementPhase.NEW_CONTAINER


def run_packing_step(
    pieces: PieceList,
    containers: list[Container],
    container_width: float,
    container_height: float,
    initial_capacity: float,
    provisioner: ContainerProvisionerProtocol,
    policy: PackingPolicy | None = None,
) -> PackingStep:
    """Make one packing decision, mutating the backlog and containers.

    Args:
        pieces: Backlog of unplaced pieces. Sorted in place, largest first;
            committed pieces are removed.
        containers: Open containers. A newly opened container is appended.
        container_width: Width of containers opened by this step.
        container_height: Height of containers opened by this step.
        initial_capacity: Fill fraction (e.g. 0.25 or 1/3) below which a
            container takes a single piece without group search.
        provisioner: Source of new containers.
        policy: Scan, fit and waste policies. Defaults to PackingPolicy().

    Returns:
        The commits made by this step.

    Raises:
        PackingInvariantError: If a freshly opened container cannot take
            the largest remaining piece.
    """
    policy = policy or PackingPolicy()

    if not pieces:
        return PackingStep()

    pieces.sort(SortOrder.DESCENDING)

    for container in _scanned(containers, policy):
        placement = _fill_initial_capacity(pieces, container, initial_capacity)
        if placement is not None:
            return PackingStep(placements=(placement,))

    placements: list[StepPlacement] = []
    for container in _scanned(containers, policy):
        if pieces.are_all_bigger_than(container.free_area):
            logger.debug(
                "Container %d skipped: every piece exceeds free area %s",
                container.index,
                container.free_area,
            )
            continue

        reference_area = (
            containers[0].area
            if policy.waste_reference is WasteReference.FIRST_CONTAINER
            else container.area
        )
        placement = _escalate_waste(
            pieces, container, policy.waste_increment(reference_area)
        )
        if placement is None:
            continue

        placements.append(placement)
        if policy.after_group_fit is AfterGroupFit.STOP:
            break

    if placements:
        return PackingStep(placements=tuple(placements))

    return PackingStep(
        placements=(
            _open_new_container(
                pieces, containers, container_width, container_height, provisioner
            ),
        )
    )


def _scanned(
    containers: list[Container], policy: PackingPolicy
) -> Iterable[Container]:
    """Containers inspected by the first two phases.

    The historical DJD step only ever looks at the most recently opened
    container; ``ContainerScan.ALL`` widens that to every container.
    """
    if policy.container_scan is ContainerScan.ALL:
        return list(containers)
    return containers[-1:]


def _fill_initial_capacity(
    pieces: PieceList,
    container: Container,
    initial_capacity: float,
) -> StepPlacement | None:
    if container.used_area >= container.area * initial_capacity:
        return None

    for piece in pieces:
        if piece.area > container.free_area:
            continue
        if try_place_in_bottom_left(container, piece):
            container.put_piece(piece)
            pieces.remove(piece)
            logger.info(
                "Placed '%s' in container %d below initial capacity %s",
                piece.label,
                container.index,
                initial_capacity,
            )
            return StepPlacement(
                phase=PlacementPhase.INITIAL_CAPACITY,
                container_index=container.index,
                pieces=(piece,),
            )
    return None


def _escalate_waste(
    pieces: PieceList,
    container: Container,
    increment: float,
) -> StepPlacement | None:
    if increment <= 0:
        raise ValueError("Waste increment must be positive")

    waste = 0.0
    while waste <= container.free_area:
        result = try_fit_pieces(pieces, container, waste)
        if result:
            return StepPlacement(
                phase=PlacementPhase.WASTE_ESCALATION,
                container_index=container.index,
                pieces=result.pieces,
                max_waste=waste,
            )
        waste += increment
    return None


def _open_new_container(
    pieces: PieceList,
    containers: list[Container],
    width: float,
    height: float,
    provisioner: ContainerProvisionerProtocol,
) -> StepPlacement:
    container = provisioner.open_new_container(containers, width, height)
    containers.append(container)
    logger.info(
        "Opened container %d (%sx%s) at (%s, %s)",
        container.index,
        container.width,
        container.height,
        container.x,
        container.y,
    )

    biggest = pieces.get_biggest()
    if not try_place_in_bottom_left(container, biggest):
        raise PackingInvariantError(
            f"Piece '{biggest.label}' ({biggest.width}x{biggest.height}) does "
            f"not fit in a new {container.width}x{container.height} container",
            piece=biggest,
            container=container,
        )

    container.put_piece(biggest)
    pieces.remove(biggest)
    return StepPlacement(
        phase=PlacementPhase.NEW_CONTAINER,
        container_index=container.index,
        pieces=(biggest,),
    )


class DJDPacker:
    """Packs a whole backlog by repeating DJD steps.

    Attributes:
        container_width: Width of every container opened.
        container_height: Height of every container opened.
        initial_capacity: Fill fraction for the initial-capacity phase.
        provisioner: Source of new containers.
        policy: Step policies.
    """

    def __init__(
        self,
        container_width: float,
        container_height: float,
        provisioner: ContainerProvisionerProtocol,
        initial_capacity: float = 0.25,
        policy: PackingPolicy | None = None,
    ) -> None:
        if container_width <= 0 or container_height <= 0:
            raise ValueError("Container dimensions must be positive")
        if not 0 <= initial_capacity <= 1:
            raise ValueError("Initial capacity must be between 0 and 1")
        self.container_width = container_width
        self.container_height = container_height
        self.initial_capacity = initial_capacity
        self.provisioner = provisioner
        self.policy = policy or PackingPolicy()

    def step(self, pieces: PieceList, containers: list[Container]) -> PackingStep:
        """Run a single DJD step with this packer's settings."""
        return run_packing_step(
            pieces,
            containers,
            self.container_width,
            self.container_height,
            self.initial_capacity,
            self.provisioner,
            self.policy,
        )

    def pack(
        self,
        pieces: PieceList,
        containers: list[Container] | None = None,
    ) -> list[Container]:
        """Place every piece of the backlog.

        Args:
            pieces: Backlog; emptied by the call.
            containers: Already open containers to keep filling, if any.

        Returns:
            All containers, including those opened during packing.

        Raises:
            PackingInvariantError: If some piece can never be placed.
        """
        containers = containers if containers is not None else []
        logger.debug(
            "Packing %d pieces into %sx%s containers",
            len(pieces),
            self.container_width,
            self.container_height,
        )

        steps = 0
        while pieces:
            self.step(pieces, containers)
            steps += 1

        logger.info(
            "Packed into %d containers in %d steps", len(containers), steps
        )
        return containers
