"""Container provisioning for packing runs."""

from __future__ import annotations

import logging
from typing import Sequence

from stockpack.domain.entities import Container

logger = logging.getLogger(__name__)


class RowProvisioner:
    """Opens containers side by side along the x axis.

    Each container starts ``gap`` units right of the previous one at
    ``y = 0``, so every container of a run occupies its own region of the
    plane and cut diagrams can be laid out in a row.

    Attributes:
        gap: Horizontal spacing between neighbouring containers.
    """

    def __init__(self, gap: float = 0.0) -> None:
        if gap < 0:
            raise ValueError("Container gap must be non-negative")
        self.gap = gap

    def open_new_container(
        self,
        existing_containers: Sequence[Container],
        width: float,
        height: float,
    ) -> Container:
        index = len(existing_containers)
        if existing_containers:
            last = existing_containers[-1]
            x = last.right + self.gap
        else:
            x = 0.0

        logger.debug("Provisioning container %d at x=%s", index, x)
        return Container(width=width, height=height, x=x, y=0.0, index=index)
