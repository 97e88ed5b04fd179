"""Summary statistics for a set of claims stamped onto a sheet."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from fabric_claims.src.core.claim import Claim
from fabric_claims.src.core.sheet import Sheet

NO_CLAIMS_MESSAGE = "Found no claims in stdin."


@dataclass
class OverlapReport:
    claim_count: int
    width: int
    height: int
    overlapping: int
    unclaimed: int
    overlap_free: Optional[int] = None

    def lines(self) -> List[str]:
        """Return the report as printable lines."""
        out = [
            f"Found {self.claim_count} claims that requires a sheet of size "
            f"{self.width}×{self.height} inches",
            f"Result: {self.overlapping} square inch(es) are overlapping other claims.",
            f"Bonus: {self.unclaimed} square inch(es) are left unclaimed",
        ]
        if self.overlap_free is not None:
            out.append(f"Intact: {self.overlap_free} claim(s) do not overlap any other claim")
        return out


def analyze_claims(
    claims: Sequence[Claim],
    cell_state: str = "counting",
    *,
    overlap_free: bool = False,
) -> Tuple[OverlapReport, Sheet]:
    """Stamp ``claims`` on a fitting sheet and summarise the result.

    ``claims`` must not be empty.  When ``overlap_free`` is set the report
    also counts claims that share no cell with another claim, which needs
    the ``counting`` cell state.
    """
    sheet = Sheet.for_claims(claims, cell_state)
    overlapping = sheet.stamp_all(claims)
    report = OverlapReport(
        claim_count=len(claims),
        width=sheet.width,
        height=sheet.height,
        overlapping=overlapping,
        unclaimed=sheet.unclaimed_cells(),
    )
    if overlap_free:
        report.overlap_free = len(sheet.overlap_free_claims(claims))
    return report, sheet


__all__ = ["OverlapReport", "analyze_claims", "NO_CLAIMS_MESSAGE"]
