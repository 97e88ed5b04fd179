"""Input and image output helpers."""

from .claim_reader import iter_lines, load_claims, read_claims
from .heatmap import heatmap_colors, save_heatmap

__all__ = [
    "iter_lines",
    "read_claims",
    "load_claims",
    "heatmap_colors",
    "save_heatmap",
]
