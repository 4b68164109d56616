"""Helpers shared across tests"""

import io

from PIL import Image

from term_crt.geometry import TerminalGeometry

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
TRANSPARENT = (0, 0, 0, 0)


def fixed_geometry(columns=80, rows=24):
    geometry = TerminalGeometry(columns, rows)

    def get_geometry():
        get_geometry.calls += 1
        return geometry

    get_geometry.calls = 0
    return get_geometry


def column(*pixels):
    """Returns a 1-pixel-wide RGBA image with the given pixels, top to bottom."""
    return Image.frombytes("RGBA", (1, len(pixels)), bytes(sum(pixels, ())))


def png_bytes(img):
    buf = io.BytesIO()
    img.save(buf, "PNG")
    return buf.getvalue()
