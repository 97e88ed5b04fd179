"""Per-cell storage for the claim sheet.

Two representations are available: ``counting`` keeps how many claims
touched each cell, ``occupancy`` only remembers whether a cell was touched.
Both answer the same two questions the accumulator asks while stamping.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Tuple, Type

import numpy as np

from fabric_claims.src.errors import ConfigError, SheetTooLargeError


class CellState(ABC):
    """Interface for the cells backing a :class:`~fabric_claims.src.core.sheet.Sheet`.

    ``ys`` and ``xs`` are slices selecting a rectangle of cells.  Arrays are
    indexed ``[y, x]``.
    """

    name: str
    dtype: type

    def __init__(self, shape: Tuple[int, int]):
        try:
            self.cells = np.zeros(shape, dtype=self.dtype)
        except (ValueError, OverflowError, MemoryError) as exc:
            h, w = shape
            raise SheetTooLargeError(f"Cannot allocate a {w}x{h} sheet: {exc}") from exc

    @property
    def shape(self) -> Tuple[int, int]:
        return self.cells.shape

    def was_covered(self, ys: slice, xs: slice) -> int:
        """Return how many cells of the rectangle are already covered."""
        return int(np.count_nonzero(self.cells[ys, xs]))

    @abstractmethod
    def mark_covered(self, ys: slice, xs: slice) -> None:
        """Mark every cell of the rectangle covered once."""

    def unclaimed(self) -> int:
        return int(self.cells.size - np.count_nonzero(self.cells))

    @abstractmethod
    def counts(self) -> np.ndarray:
        """Return per-cell claim counts."""

    @property
    def tracks_counts(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}(shape={self.shape})"


class CountingCells(CellState):
    """Cells holding the number of claims that covered them."""

    name = "counting"
    dtype = np.uint32

    def mark_covered(self, ys: slice, xs: slice) -> None:
        self.cells[ys, xs] += 1

    def counts(self) -> np.ndarray:
        return self.cells

    @property
    def tracks_counts(self) -> bool:
        return True


class OccupancyCells(CellState):
    """Cells holding a single covered flag."""

    name = "occupancy"
    dtype = np.bool_

    def mark_covered(self, ys: slice, xs: slice) -> None:
        self.cells[ys, xs] = True

    def counts(self) -> np.ndarray:
        return self.cells.astype(np.uint32)


CELL_STATES: Dict[str, Type[CellState]] = {
    CountingCells.name: CountingCells,
    OccupancyCells.name: OccupancyCells,
}


def make_cell_state(kind: str, shape: Tuple[int, int]) -> CellState:
    """Instantiate the cell state registered under ``kind``."""
    try:
        cls = CELL_STATES[kind]
    except KeyError as exc:
        known = ", ".join(sorted(CELL_STATES))
        raise ConfigError(f"Unknown cell state '{kind}' (expected one of: {known})") from exc
    return cls(shape)


__all__ = [
    "CellState",
    "CountingCells",
    "OccupancyCells",
    "CELL_STATES",
    "make_cell_state",
]
