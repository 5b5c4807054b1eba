"""Unit tests for RowProvisioner."""

from __future__ import annotations

import pytest

from stockpack.domain.entities import Container
from stockpack.infrastructure.provisioning import RowProvisioner


class TestRowProvisioner:
    """Tests for RowProvisioner."""

    def test_first_container_at_origin(self) -> None:
        container = RowProvisioner().open_new_container([], 10, 5)

        assert (container.x, container.y) == (0, 0)
        assert container.index == 0
        assert (container.width, container.height) == (10, 5)
        assert container.piece_count == 0

    def test_containers_laid_out_in_a_row(self) -> None:
        provisioner = RowProvisioner(gap=2)
        containers: list[Container] = []

        for _ in range(3):
            containers.append(provisioner.open_new_container(containers, 10, 5))

        assert [c.x for c in containers] == [0, 12, 24]
        assert [c.index for c in containers] == [0, 1, 2]

    def test_does_not_append_to_existing(self) -> None:
        existing: list[Container] = []

        RowProvisioner().open_new_container(existing, 10, 5)

        assert existing == []

    def test_rejects_negative_gap(self) -> None:
        with pytest.raises(ValueError, match="gap"):
            RowProvisioner(gap=-1)
