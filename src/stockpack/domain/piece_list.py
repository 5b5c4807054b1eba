"""Ordered piece backlog used by the packing engine."""

from __future__ import annotations

from typing import Iterable, Iterator

from .entities import Piece
from .value_objects import SortOrder


class PieceList:
    """Mutable, ordered collection of pieces awaiting placement.

    Removal is by identity, matching the ownership model: a piece leaves
    the backlog exactly when it is committed to a container.
    """

    def __init__(self, pieces: Iterable[Piece] = ()) -> None:
        self._pieces: list[Piece] = list(pieces)

    def __len__(self) -> int:
        return len(self._pieces)

    def __iter__(self) -> Iterator[Piece]:
        return iter(self._pieces)

    def __getitem__(self, index: int) -> Piece:
        return self._pieces[index]

    def __bool__(self) -> bool:
        return bool(self._pieces)

    def __repr__(self) -> str:
        return f"PieceList({self._pieces!r})"

    @property
    def size(self) -> int:
        return len(self._pieces)

    @property
    def total_area(self) -> float:
        return sum(piece.area for piece in self._pieces)

    def sort(self, order: SortOrder = SortOrder.DESCENDING) -> None:
        """Sort in place by area. Pieces of equal area keep their order."""
        self._pieces.sort(
            key=lambda p: p.area,
            reverse=order is SortOrder.DESCENDING,
        )

    def is_sorted(self, order: SortOrder = SortOrder.DESCENDING) -> bool:
        areas = [piece.area for piece in self._pieces]
        if order is SortOrder.DESCENDING:
            return all(a >= b for a, b in zip(areas, areas[1:]))
        return all(a <= b for a, b in zip(areas, areas[1:]))

    def remove(self, piece: Piece) -> None:
        """Remove this exact piece object.

        Raises:
            ValueError: If the piece is not in the list.
        """
        for i, candidate in enumerate(self._pieces):
            if candidate is piece:
                del self._pieces[i]
                return
        raise ValueError(f"Piece '{piece.label}' is not in the list")

    def get_biggest(self) -> Piece:
        """Return the piece with the largest area (first one on ties).

        Raises:
            IndexError: If the list is empty.
        """
        if not self._pieces:
            raise IndexError("get_biggest() on an empty piece list")
        return max(self._pieces, key=lambda p: p.area)

    def are_all_bigger_than(self, threshold: float) -> bool:
        """True iff every piece's area exceeds the threshold."""
        return all(piece.area > threshold for piece in self._pieces)
