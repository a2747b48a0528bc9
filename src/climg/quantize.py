import numpy as np

from climg.charsets import SHADES


def quantize_grid(grid: np.ndarray, levels: int = len(SHADES)) -> np.ndarray:
    """Map luminance values in [0, 1] to palette indices in [0, levels - 1].

    ``floor(lum * (levels - 1))`` with the result clamped, so 1.0 lands on the
    last index and stray values just outside the range stay in bounds.
    """
    indices = np.floor(np.asarray(grid, dtype=np.float64) * (levels - 1))
    return np.clip(indices, 0, levels - 1).astype(np.intp)


def quantize(lum: float, levels: int = len(SHADES)) -> int:
    """Scalar form of :func:`quantize_grid`."""
    return int(quantize_grid(lum, levels))
