"""Value objects for the packing domain."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Axis directions used to apply a movement distance.

    The y axis grows upward, so UP increases a piece's bottom coordinate.
    """

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class SortOrder(Enum):
    """Sort order for piece collections (by area)."""

    ASCENDING = "ascending"
    DESCENDING = "descending"


class ContainerScan(str, Enum):
    """Which existing containers a packing step inspects.

    Attributes:
        LAST: Only the most recently opened container. This is the
            historical behaviour of the DJD step.
        ALL: Every open container, oldest first.
    """

    LAST = "last"
    ALL = "all"


class AfterGroupFit(str, Enum):
    """What a packing step does after a group fits during waste escalation.

    Attributes:
        STOP: End the step immediately.
        CONTINUE: Move on to the next scanned container. A new container is
            only opened if nothing was placed during the step.
    """

    STOP = "stop"
    CONTINUE = "continue"


class WasteReference(str, Enum):
    """Which container area the waste increment is derived from.

    Attributes:
        FIRST_CONTAINER: Derived once from the first container of the run.
        PER_CONTAINER: Derived from each candidate container's own area.
    """

    FIRST_CONTAINER = "first_container"
    PER_CONTAINER = "per_container"


class PlacementPhase(str, Enum):
    """Phase of a packing step that committed pieces."""

    INITIAL_CAPACITY = "initial_capacity"
    WASTE_ESCALATION = "waste_escalation"
    NEW_CONTAINER = "new_container"
    NOTHING_TO_PLACE = "nothing_to_place"


@dataclass(frozen=True)
class PackingPolicy:
    """Tunable policies of the DJD packing step.

    Attributes:
        container_scan: Which containers the first two phases inspect.
        after_group_fit: Whether a group fit ends the step.
        waste_reference: Container whose area sets the waste increment.
        waste_divisor: The waste budget grows by reference area / divisor.
    """

    container_scan: ContainerScan = ContainerScan.LAST
    after_group_fit: AfterGroupFit = AfterGroupFit.STOP
    waste_reference: WasteReference = WasteReference.FIRST_CONTAINER
    waste_divisor: int = 20

    def __post_init__(self) -> None:
        if self.waste_divisor <= 0:
            raise ValueError("Waste divisor must be positive")

    def waste_increment(self, reference_area: float) -> float:
        """Step by which the tolerated waste grows during escalation."""
        return reference_area / self.waste_divisor
