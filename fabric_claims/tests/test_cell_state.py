import numpy as np
import pytest

from fabric_claims.src.core.cell_state import CellState, CountingCells, OccupancyCells, make_cell_state
from fabric_claims.src.errors import ConfigError, SheetTooLargeError


def test_counting_cells_accumulate():
    cells = CountingCells((3, 4))
    ys, xs = slice(0, 2), slice(1, 3)
    assert cells.was_covered(ys, xs) == 0
    cells.mark_covered(ys, xs)
    cells.mark_covered(ys, xs)
    assert cells.was_covered(ys, xs) == 4
    assert cells.counts()[0, 1] == 2
    assert cells.unclaimed() == 12 - 4


def test_occupancy_cells_only_flag():
    cells = OccupancyCells((2, 2))
    cells.mark_covered(slice(0, 1), slice(0, 2))
    cells.mark_covered(slice(0, 1), slice(0, 2))
    assert cells.was_covered(slice(0, 2), slice(0, 2)) == 2
    assert np.array_equal(cells.counts(), np.array([[1, 1], [0, 0]]))
    assert not cells.tracks_counts


def test_make_cell_state_by_name():
    assert isinstance(make_cell_state("counting", (1, 1)), CountingCells)
    assert isinstance(make_cell_state("occupancy", (1, 1)), OccupancyCells)
    with pytest.raises(ConfigError):
        make_cell_state("sparse", (1, 1))


def test_base_cell_state_is_abstract():
    with pytest.raises(TypeError):
        CellState((1, 1))


def test_unallocatable_sheet():
    with pytest.raises(SheetTooLargeError) as info:
        CountingCells((1, 2**64))
    assert "Cannot allocate" in str(info.value)
