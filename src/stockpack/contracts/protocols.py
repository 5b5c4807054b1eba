"""Service protocols for dependency injection.

The packing engine does not decide where containers come from. It asks a
provisioner for a new one whenever no open container accepts a piece.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence, runtime_checkable

if TYPE_CHECKING:
    from stockpack.domain.entities import Container


@runtime_checkable
class ContainerProvisionerProtocol(Protocol):
    """Protocol for opening new, empty containers.

    Implementations choose the container origin. The packing engine
    assumes a fresh container is empty and large enough to hold the
    largest remaining piece; if it is not, the engine raises
    ``PackingInvariantError``.

    Example:
        ```python
        class FixedOriginProvisioner:
            def open_new_container(
                self, existing_containers, width, height
            ) -> Container:
                return Container(width=width, height=height,
                                 index=len(existing_containers))
        ```
    """

    def open_new_container(
        self,
        existing_containers: Sequence[Container],
        width: float,
        height: float,
    ) -> Container:
        """Create an empty container of the requested footprint.

        Args:
            existing_containers: Containers already open in the run. The
                new container is not added to this sequence by the
                provisioner.
            width: Container width.
            height: Container height.

        Returns:
            A new, empty Container.
        """
        ...
