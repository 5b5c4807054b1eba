"""Application commands orchestrating a packing run."""

from __future__ import annotations

import logging
from collections import Counter

from stockpack.application.config import (
    PackingJobConfiguration,
    config_to_pieces,
    config_to_policy,
)
from stockpack.contracts.dtos import ContainerLayout, PackingOutput
from stockpack.contracts.protocols import ContainerProvisionerProtocol
from stockpack.domain.entities import Container
from stockpack.domain.exceptions import PackingInvariantError
from stockpack.domain.services import DJDPacker
from stockpack.infrastructure.provisioning import RowProvisioner

logger = logging.getLogger(__name__)


class PackJobCommand:
    """Command that packs every piece of a job into containers.

    Builds the backlog and policies from the job configuration, repeats
    DJD steps until the backlog is empty, and snapshots the containers
    into a PackingOutput.

    Attributes:
        provisioner: Source of new containers. When None, each run uses a
            RowProvisioner with the job's container gap.
    """

    def __init__(self, provisioner: ContainerProvisionerProtocol | None = None) -> None:
        self.provisioner = provisioner

    def execute(self, config: PackingJobConfiguration) -> PackingOutput:
        """Pack the job.

        Args:
            config: Validated job configuration.

        Returns:
            PackingOutput with one layout per container. If a piece cannot
            be placed in an empty container, the output carries the error
            and the layouts packed so far.
        """
        provisioner = self.provisioner or RowProvisioner(gap=config.container.gap)
        packer = DJDPacker(
            container_width=config.container.width,
            container_height=config.container.height,
            provisioner=provisioner,
            initial_capacity=config.initial_capacity,
            policy=config_to_policy(config),
        )

        pieces = config_to_pieces(config)
        containers: list[Container] = []
        phase_counts: Counter[str] = Counter()
        steps = 0
        errors: list[str] = []

        logger.info("Packing %d pieces", len(pieces))
        try:
            while pieces:
                step = packer.step(pieces, containers)
                steps += 1
                for placement in step.placements:
                    phase_counts[placement.phase.value] += 1
        except PackingInvariantError as e:
            logger.error("Packing aborted: %s", e)
            errors.append(str(e))

        return PackingOutput(
            layouts=tuple(ContainerLayout.from_container(c) for c in containers),
            steps=steps,
            phase_counts=dict(phase_counts),
            errors=tuple(errors),
        )
