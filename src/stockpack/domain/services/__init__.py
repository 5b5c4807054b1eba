"""Domain services: bottom-left-fill, group search and the DJD step."""

from .bottom_left_fill import move_piece_to_lower_left, try_place_in_bottom_left
from .djd import DJDPacker, PackingStep, StepPlacement, run_packing_step
from .group_search import (
    NO_FIT,
    FitResult,
    try_fit_one_piece,
    try_fit_pieces,
    try_fit_three_pieces,
    try_fit_two_pieces,
)

__all__ = [
    "DJDPacker",
    "FitResult",
    "NO_FIT",
    "PackingStep",
    "StepPlacement",
    "move_piece_to_lower_left",
    "run_packing_step",
    "try_fit_one_piece",
    "try_fit_pieces",
    "try_fit_three_pieces",
    "try_fit_two_pieces",
    "try_place_in_bottom_left",
]
