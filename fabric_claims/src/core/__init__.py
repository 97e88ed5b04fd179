"""Claim records, cell states and the sheet accumulator."""

from .claim import Claim, format_claim, parse_claim
from .cell_state import CELL_STATES, CellState, CountingCells, OccupancyCells, make_cell_state
from .sheet import Sheet, required_size

__all__ = [
    "Claim",
    "parse_claim",
    "format_claim",
    "CellState",
    "CountingCells",
    "OccupancyCells",
    "CELL_STATES",
    "make_cell_state",
    "Sheet",
    "required_size",
]
