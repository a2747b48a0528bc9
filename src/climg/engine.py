from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from climg.charsets import SHADES
from climg.model import ConsoleGrid
from climg.partition import partition
from climg.quantize import quantize_grid
from climg.sampling import sample_grid
from climg.tonemap import DEFAULT_EXPOSURE, apply_exposure, validate_exposure


@dataclass
class BlockGrid:
    indices: np.ndarray  # (rows, cols) palette indices
    luminance: np.ndarray  # (rows, cols) tone-mapped luminance in [0, 1]


class ShadeEngine:
    """Rendering engine that maps image cells to shade glyphs by mean luminance."""

    def __init__(self, exposure: float = DEFAULT_EXPOSURE, palette: str = SHADES):
        self.exposure = validate_exposure(exposure)
        self.palette = palette

    def render(self, pixels: np.ndarray, grid: ConsoleGrid) -> BlockGrid:
        """Convert an (H, W, 3) uint8 array to one palette index per console cell."""
        height, width = pixels.shape[:2]
        columns, rows = partition(width, height, grid)
        luminance = apply_exposure(sample_grid(pixels, columns, rows), self.exposure)
        indices = quantize_grid(luminance, len(self.palette))
        return BlockGrid(indices=indices, luminance=luminance)
