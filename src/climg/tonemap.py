import math

import numpy as np

DEFAULT_EXPOSURE = 3.0


class InvalidExposure(ValueError):
    pass


def validate_exposure(value: float) -> float:
    value = float(value)
    if not math.isfinite(value) or value <= 0.0:
        raise InvalidExposure(f"Exposure must be a finite number > 0, got {value}")
    return value


def apply_exposure(lum, exposure: float):
    """Scale luminance by ``exposure`` and clamp to [0, 1]. Accepts a float or an array."""
    mapped = np.clip(np.asarray(lum, dtype=np.float64) * exposure, 0.0, 1.0)
    return mapped if mapped.ndim else float(mapped)
