import io
import sys
from pathlib import Path

import numpy as np
import pytest
from PIL import Image

# Modules live at the repository root
root_path = Path(__file__).parent.parent
sys.path.insert(0, str(root_path))


def png_bytes(img: Image.Image) -> bytes:
    buf = io.BytesIO()
    img.save(buf, format='PNG')
    return buf.getvalue()


@pytest.fixture
def solid_image():
    """Factory for PNG bytes of a single-color image."""
    def make(color, size=(64, 64), mode='RGB'):
        return png_bytes(Image.new(mode, size, color))
    return make


@pytest.fixture
def array_image():
    """Factory for PNG bytes from an (h, w, channels) uint8 array."""
    def make(pixels: np.ndarray):
        return png_bytes(Image.fromarray(pixels.astype(np.uint8)))
    return make
