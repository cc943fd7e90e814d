"""Image textures sampled with normalised (s, t) coordinates."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import numpy as np
from PIL import Image


@dataclass
class Texture:
    """Pixel data with its origin at the lower-left corner.

    ``data`` has shape (height, width, channels) with at least three
    channels; row 0 is the bottom row. An empty texture samples as black.
    """

    data: np.ndarray | None = field(default=None)

    def __post_init__(self) -> None:
        if self.data is None:
            return
        arr = np.asarray(self.data, dtype=np.uint8)
        if arr.ndim != 3 or arr.shape[2] < 3:
            raise ValueError("texture data must have shape (height, width, channels>=3)")
        self.data = arr

    @property
    def width(self) -> int:
        return 0 if self.data is None else self.data.shape[1]

    @property
    def height(self) -> int:
        return 0 if self.data is None else self.data.shape[0]

    @property
    def channels(self) -> int:
        return 0 if self.data is None else self.data.shape[2]

    def color_at(self, s: float, t: float) -> np.ndarray:
        """Return the colour at (s, t) in [0, 1]; black outside the image.

        Channels are returned in reversed order (third, second, first).
        """
        width, height = self.width, self.height
        if width == 0 or height == 0:
            return np.zeros(3)
        i = int(s * width)
        j = int(t * height)
        if not (0 <= i < width and 0 <= j < height):
            return np.zeros(3)
        r, g, b = (int(c) for c in self.data[j, i, :3])
        return np.array([b / 255.0, g / 255.0, r / 255.0])


def load_texture(path) -> Texture:
    """Load an image file as a texture with a lower-left origin."""
    with Image.open(Path(path)) as img:
        if img.mode not in ("RGB", "RGBA"):
            img = img.convert("RGB")
        pixels = np.asarray(img, dtype=np.uint8)
    return Texture(np.flipud(pixels).copy())