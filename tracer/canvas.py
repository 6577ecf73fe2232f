from pathlib import Path

import numpy as np
from PIL import Image

from tracer.tuples import Color

PPM_LINE_LENGTH = 70
PPM_MAX_VALUE = 255


class Canvas:
    """Row-major grid of colors, black on creation."""

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3), dtype=np.float64)  # (height, width, rgb)

    def _check(self, x: int, y: int):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} canvas")

    def write_pixel(self, x: int, y: int, color: Color):
        self._check(x, y)
        self.pixels[y, x] = (color.red, color.green, color.blue)

    def pixel_at(self, x: int, y: int) -> Color:
        self._check(x, y)
        r, g, b = self.pixels[y, x]
        return Color(r, g, b)

    def to_bytes_array(self) -> np.ndarray:
        """Channels scaled to 0..255, rounded half up and clamped."""
        scaled = np.floor(self.pixels * PPM_MAX_VALUE + 0.5)
        return np.clip(scaled, 0, PPM_MAX_VALUE).astype(np.uint8)

    def to_ppm(self) -> str:
        values = self.to_bytes_array()
        lines = ["P3", f"{self.width} {self.height}", str(PPM_MAX_VALUE)]
        for row in values:
            line = ""
            for value in row.reshape(-1):
                text = str(int(value))
                # wrap before a value would push the line to the limit
                if line and len(line) + 1 + len(text) >= PPM_LINE_LENGTH:
                    lines.append(line)
                    line = ""
                line = f"{line} {text}" if line else text
            lines.append(line)
        return "\n".join(lines) + "\n"

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.to_bytes_array())

    def save(self, path):
        """Write a plain PPM for .ppm paths, anything else goes through Pillow."""
        path = Path(path)
        if path.suffix.lower() == ".ppm":
            path.write_text(self.to_ppm())
        else:
            self.to_image().save(path)
