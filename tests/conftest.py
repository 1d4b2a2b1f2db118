import io

import numpy as np
from PIL import Image

ESC = "\x1b"
RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
BLUE = (0, 0, 255, 255)
CLEAR = (0, 0, 0, 0)


def make_grid(rows):
    """Build a (height, width, 4) uint8 grid from nested lists of RGBA tuples."""
    return np.array(rows, dtype=np.uint8).reshape(len(rows), len(rows[0]) if rows else 0, 4)


def png_bytes(size=(4, 4), colour=RED, mode="RGBA"):
    """Encode a solid image as PNG in memory."""
    img = Image.new(mode, size, colour if mode == "RGBA" else colour[:3])
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()
