from pathlib import Path

import numpy as np
from PIL import Image

from climg.charsets import SHADES
from climg.engine import ShadeEngine
from climg.model import ConsoleGrid
from climg.tonemap import DEFAULT_EXPOSURE


class ImageDecodeError(OSError):
    pass


def load_pixels(image: Image.Image | str | Path) -> np.ndarray:
    """Decode an image into an (H, W, 3) uint8 array, dropping any alpha channel."""
    try:
        if not isinstance(image, Image.Image):
            with Image.open(image) as opened:
                return np.asarray(opened.convert("RGB"), dtype=np.uint8)
        return np.asarray(image.convert("RGB"), dtype=np.uint8)
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        raise ImageDecodeError(f"Failed to load image: {e}") from e


def assemble(indices: np.ndarray, palette: str = SHADES, line_breaks: bool = False) -> str:
    """Serialise palette indices row-major after a single leading newline.

    Rows are not separated unless ``line_breaks`` is set; the terminal's own
    wrapping at the detected width lays the block out.
    """
    lines = ["".join(palette[i] for i in row) for row in indices]
    return "\n" + ("\n" if line_breaks else "").join(lines)


def image_to_blocks(
    image: Image.Image | np.ndarray | str | Path,
    grid: ConsoleGrid,
    exposure: float = DEFAULT_EXPOSURE,
    palette: str = SHADES,
    line_breaks: bool = False,
) -> str:
    pixels = image if isinstance(image, np.ndarray) else load_pixels(image)
    engine = ShadeEngine(exposure=exposure, palette=palette)
    result = engine.render(pixels, grid)
    return assemble(result.indices, engine.palette, line_breaks=line_breaks)
