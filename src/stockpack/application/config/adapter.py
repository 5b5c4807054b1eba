"""Convert validated job configuration into domain objects."""

from __future__ import annotations

from stockpack.application.config.schemas import PackingJobConfiguration
from stockpack.domain.entities import Piece
from stockpack.domain.piece_list import PieceList
from stockpack.domain.value_objects import PackingPolicy


def config_to_pieces(config: PackingJobConfiguration) -> PieceList:
    """Expand piece types into individual pieces.

    Each piece type with quantity N becomes N pieces. Labels get a
    ``#n`` suffix when N > 1; unlabeled types are named after their
    position in the job file (``P1``, ``P2``, ...).

    Args:
        config: Validated job configuration.

    Returns:
        Backlog in job file order (not yet sorted).
    """
    pieces: list[Piece] = []
    for position, piece_config in enumerate(config.pieces, start=1):
        base_label = piece_config.label or f"P{position}"
        for i in range(piece_config.quantity):
            label = base_label if piece_config.quantity == 1 else f"{base_label} #{i + 1}"
            pieces.append(
                Piece(
                    width=piece_config.width,
                    height=piece_config.height,
                    label=label,
                )
            )
    return PieceList(pieces)


def config_to_policy(config: PackingJobConfiguration) -> PackingPolicy:
    """Convert the policy section to the domain PackingPolicy."""
    return PackingPolicy(
        container_scan=config.policy.container_scan,
        after_group_fit=config.policy.after_group_fit,
        waste_reference=config.policy.waste_reference,
        waste_divisor=config.policy.waste_divisor,
    )
