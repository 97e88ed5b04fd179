from __future__ import annotations

"""Sheet of fabric onto which claims are stamped."""

from typing import Iterable, List, Sequence

import numpy as np

from fabric_claims.src.core.cell_state import CellState, make_cell_state
from fabric_claims.src.core.claim import Claim
from fabric_claims.src.errors import ConfigError, SheetTooSmallError
from fabric_claims.src.utils.logger import get_logger

logger = get_logger(__name__)


def required_size(claims: Sequence[Claim]) -> tuple[int, int]:
    """Return ``(width, height)`` needed to hold every claim in ``claims``."""
    if not claims:
        raise ValueError("Cannot size a sheet for zero claims")
    width = max(c.max_x for c in claims) + 1
    height = max(c.max_y for c in claims) + 1
    return width, height


class Sheet:
    """2D grid accumulating claim coverage.

    Stamping a claim reports how many of its cells were already covered by
    earlier claims.  Summed over every claim this is the number of
    overlapping square inches, independent of stamping order.
    """

    def __init__(self, width: int, height: int, cell_state: str = "counting"):
        self.width = width
        self.height = height
        self.state: CellState = make_cell_state(cell_state, (height, width))
        logger.debug("Allocated %dx%d sheet with %s cells", width, height, self.state.name)

    @classmethod
    def for_claims(cls, claims: Sequence[Claim], cell_state: str = "counting") -> "Sheet":
        width, height = required_size(claims)
        return cls(width, height, cell_state)

    # ------------------------------------------------------------------
    def _window(self, claim: Claim) -> tuple[slice, slice]:
        if claim.max_x >= self.width or claim.max_y >= self.height:
            raise SheetTooSmallError(
                f"Claim #{claim.id} reaches ({claim.max_x}, {claim.max_y}) but the sheet "
                f"only spans (0..{self.width - 1}, 0..{self.height - 1})"
            )
        ys = slice(claim.position[1], claim.max_y + 1)
        xs = slice(claim.position[0], claim.max_x + 1)
        return ys, xs

    def stamp(self, claim: Claim) -> int:
        """Mark ``claim`` on the sheet and return its already covered cell count."""
        ys, xs = self._window(claim)
        overlapping = self.state.was_covered(ys, xs)
        self.state.mark_covered(ys, xs)
        return overlapping

    def stamp_all(self, claims: Iterable[Claim]) -> int:
        total = 0
        for claim in claims:
            total += self.stamp(claim)
        logger.info("Stamped claims, %d overlapping square inches", total)
        return total

    # ------------------------------------------------------------------
    def unclaimed_cells(self) -> int:
        """Return the number of cells no claim covered."""
        return self.state.unclaimed()

    def _require_counts(self, what: str) -> np.ndarray:
        if not self.state.tracks_counts:
            raise ConfigError(f"{what} needs the 'counting' cell state, not '{self.state.name}'")
        return self.state.counts()

    def contested_cells(self) -> int:
        """Return the number of cells covered by two or more claims."""
        counts = self._require_counts("Counting contested cells")
        return int(np.count_nonzero(counts >= 2))

    def overlap_free_claims(self, claims: Iterable[Claim]) -> List[Claim]:
        """Return the claims whose every cell was covered exactly once.

        Must be called after every claim has been stamped.
        """
        counts = self._require_counts("Finding overlap-free claims")
        intact = []
        for claim in claims:
            ys, xs = self._window(claim)
            if np.all(counts[ys, xs] == 1):
                intact.append(claim)
        return intact

    def counts(self) -> np.ndarray:
        return self.state.counts()

    def __repr__(self) -> str:
        return f"Sheet(width={self.width}, height={self.height}, cells={self.state.name})"


__all__ = ["Sheet", "required_size"]
