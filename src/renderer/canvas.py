# renderer/canvas.py
from typing import Sequence
import numpy as np
from PIL import Image
from core.vector import Color3
from renderer.tone_mapping import gamma_encode

class Canvas:
    """
    Image buffer holding linear radiance per pixel. Row 0 is the top of
    the image, matching the camera's pixel coordinates.
    """
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.data = np.zeros((height, width, 3), dtype=np.float32)

    def _check(self, x: int, y: int):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} canvas")

    def draw(self, x: int, y: int, color: Color3):
        self._check(x, y)
        self.data[y, x] = (color.x, color.y, color.z)

    def write_scanline(self, y: int, colors: Sequence[Color3]):
        self._check(0, y)
        if len(colors) != self.width:
            raise IndexError(f"Scanline has {len(colors)} pixels, expected {self.width}")
        self.data[y] = [(c.x, c.y, c.z) for c in colors]

    def pixel(self, x: int, y: int) -> Color3:
        self._check(x, y)
        return Color3(*self.data[y, x])

    def to_image(self) -> np.ndarray:
        """The encoded (height, width, 3) uint8 image."""
        return gamma_encode(self.data)

    def save(self, path: str):
        Image.fromarray(self.to_image()).save(path)
