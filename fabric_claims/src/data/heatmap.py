"""Heatmap rendering of per-cell claim density."""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from fabric_claims.src.errors import ClaimInputError
from fabric_claims.src.utils.logger import get_logger

logger = get_logger(__name__)


def heatmap_colors(counts: np.ndarray) -> np.ndarray:
    """Return an ``(H, W, 3)`` uint8 image for the ``(H, W)`` ``counts`` grid.

    Unclaimed cells are white and cells turn redder the closer their count
    gets to the highest count on the sheet.
    """
    counts = np.asarray(counts)
    image = np.full(counts.shape + (3,), 255, dtype=np.uint8)
    max_count = int(counts.max()) if counts.size else 0
    if max_count == 0:
        return image
    # round half away from zero, counts are non-negative
    scale = np.floor(counts.astype(np.float64) / max_count * 255.0 + 0.5).astype(np.uint8)
    image[..., 1] = 255 - scale
    image[..., 2] = 255 - scale
    return image


def save_heatmap(counts: np.ndarray, path: str | Path) -> Path:
    """Write the heatmap of ``counts`` as a PNG image to ``path``."""
    path = Path(path)
    image = heatmap_colors(counts)
    try:
        plt.imsave(path, image, format="png")
    except (OSError, ValueError) as exc:
        raise ClaimInputError(f"Failed to write heatmap: {exc}") from exc
    logger.info("Saved %dx%d heatmap to %s", image.shape[1], image.shape[0], path)
    return path


__all__ = ["heatmap_colors", "save_heatmap"]
