"""Pytest configuration and shared fixtures for packing tests."""

from __future__ import annotations

from typing import Any

import pytest

from stockpack.domain.entities import Container, Piece
from stockpack.domain.piece_list import PieceList
from stockpack.infrastructure.provisioning import RowProvisioner


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def provisioner() -> RowProvisioner:
    """Provisioner laying containers side by side with no gap."""
    return RowProvisioner()


@pytest.fixture
def container() -> Container:
    """An empty 10x10 container at the origin."""
    return Container(width=10, height=10)


@pytest.fixture
def make_pieces():
    """Factory building a PieceList from (width, height) pairs.

    Pieces are labelled A, B, C, ... in the given order.
    """

    def _make(*sizes: tuple[float, float]) -> PieceList:
        return PieceList(
            Piece(width=w, height=h, label=chr(ord("A") + i))
            for i, (w, h) in enumerate(sizes)
        )

    return _make


@pytest.fixture
def job_data() -> dict[str, Any]:
    """Minimal valid job configuration as a dictionary."""
    return {
        "schema_version": "1.0",
        "container": {"width": 10, "height": 10},
        "pieces": [
            {"label": "Big", "width": 6, "height": 6},
            {"label": "Strip", "width": 4, "height": 10},
            {"label": "Small", "width": 3, "height": 2, "quantity": 4},
        ],
    }
