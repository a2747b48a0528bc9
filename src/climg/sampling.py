import numpy as np

from climg.model import Cell, IntervalTable
from climg.partition import cells

# ITU-R BT.709 luma weights for linear R, G, B
LUMA_WEIGHTS = np.array([0.2126, 0.7152, 0.0722])


def srgb_to_linear(c):
    """Undo the sRGB transfer curve. Accepts a float or an array in [0, 1]."""
    c = np.asarray(c, dtype=np.float64)
    linear = np.where(c <= 0.04045, c / 12.92, ((c + 0.055) / 1.055) ** 2.4)
    return linear if linear.ndim else float(linear)


# Weighted linear contribution of every 8-bit channel value, shape (256, 3)
_WEIGHTED = np.outer(srgb_to_linear(np.arange(256) / 255.0), LUMA_WEIGHTS)


def _luminance(pixels: np.ndarray) -> np.ndarray:
    return _WEIGHTED[pixels[..., 0], 0] + _WEIGHTED[pixels[..., 1], 1] + _WEIGHTED[pixels[..., 2], 2]


def pixel_luminance(r: int, g: int, b: int) -> float:
    """Relative luminance of one 8-bit sRGB pixel."""
    return float(_WEIGHTED[r, 0] + _WEIGHTED[g, 1] + _WEIGHTED[b, 2])


def luminance_map(pixels: np.ndarray) -> np.ndarray:
    """Per-pixel luminance of an (H, W, 3) uint8 array. Returns shape (H, W)."""
    return _luminance(np.asarray(pixels, dtype=np.uint8))


def cell_luminance(pixels: np.ndarray, cell: Cell) -> float:
    """Mean luminance over a cell of an (H, W, 3) uint8 array.

    Any part of the cell outside the image counts as black: it adds nothing to
    the sum but still divides it.
    """
    h, w = pixels.shape[:2]
    x0, x1 = max(cell.x0, 0), min(cell.x1, w)
    y0, y1 = max(cell.y0, 0), min(cell.y1, h)
    total = _luminance(pixels[y0:y1, x0:x1]).sum() if x1 > x0 and y1 > y0 else 0.0
    return float(total) / cell.area


def sample_grid(pixels: np.ndarray, columns: IntervalTable, rows: IntervalTable) -> np.ndarray:
    """Average luminance of every cell. Returns array of shape (len(rows), len(columns))."""
    pixels = np.asarray(pixels, dtype=np.uint8)
    values = [cell_luminance(pixels, cell) for cell in cells(columns, rows)]
    return np.array(values, dtype=np.float64).reshape(len(rows), len(columns))
