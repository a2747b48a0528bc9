import pytest
from PIL import Image


@pytest.fixture
def image_file(tmp_path):
    """Save a solid-colour RGB image to disk and return its path."""

    def _make(width, height, colour=(0, 0, 0), name="image.png"):
        path = tmp_path / name
        Image.new("RGB", (width, height), colour).save(path)
        return path

    return _make
