"""Semantic validation of packing jobs.

Schema validation only checks each field on its own. These checks look at
the job as a whole: a piece that cannot fit in an empty container makes
the run fail, and some settings are legal but probably not intended.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from stockpack.application.config.schemas import PackingJobConfiguration

logger = logging.getLogger(__name__)

# Group search is cubic in the backlog size; beyond this it gets slow.
LARGE_BACKLOG_THRESHOLD = 500


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g. "pieces[0].width")
        message: Human-readable description of the error
        value: The invalid value
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Collected validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 clean, 1 errors, 2 warnings only."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(self, path: str, message: str, value: Any = None) -> ValidationResult:
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> ValidationResult:
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self


def validate_config(config: PackingJobConfiguration) -> ValidationResult:
    """Check a job for unplaceable pieces and questionable settings.

    Errors:
        - A piece wider or taller than the container. Rotation is not
          supported, so such a piece can never be placed.

    Warnings:
        - More than LARGE_BACKLOG_THRESHOLD pieces.
        - initial_capacity of 0, which disables the initial-capacity phase.
    """
    result = ValidationResult()
    container = config.container

    for i, piece in enumerate(config.pieces):
        if piece.width > container.width:
            result.add_error(
                f"pieces[{i}].width",
                f"Piece is wider than the container ({container.width})",
                piece.width,
            )
        if piece.height > container.height:
            result.add_error(
                f"pieces[{i}].height",
                f"Piece is taller than the container ({container.height})",
                piece.height,
            )

    if config.piece_count > LARGE_BACKLOG_THRESHOLD:
        result.add_warning(
            "pieces",
            f"{config.piece_count} pieces to pack; group search slows down "
            f"quickly beyond {LARGE_BACKLOG_THRESHOLD}",
            "Split the job into smaller batches",
        )

    if config.initial_capacity == 0:
        result.add_warning(
            "initial_capacity",
            "Initial capacity of 0 disables the initial-capacity phase",
            "Use 0.25 or 0.33",
        )

    logger.debug(
        "Validated job: %d error(s), %d warning(s)",
        len(result.errors),
        len(result.warnings),
    )
    return result
