# renderer/image.py
import os
from typing import Iterator
import numpy as np
from PIL import Image as PILImage
from core.color import Color, DEFAULT_BACKGROUND

class Image:
    """
    Row-major RGB framebuffer backed by a (height, width, 3) uint8 array.

    Writes outside the image are ignored.
    """
    def __init__(self, width: int, height: int, background: Color = None):
        if width <= 0 or height <= 0:
            raise ValueError(f"Image size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        fill = background if background is not None else DEFAULT_BACKGROUND
        self.data = np.empty((height, width, 3), dtype=np.uint8)
        self.data[:, :] = fill.to_tuple()

    @classmethod
    def from_array(cls, data: np.ndarray) -> "Image":
        if data.ndim != 3 or data.shape[2] != 3:
            raise ValueError(f"Expected an array of shape (height, width, 3), got {data.shape}")
        image = cls(data.shape[1], data.shape[0])
        image.data[:] = np.clip(data, 0, 255).astype(np.uint8)
        return image

    @classmethod
    def load(cls, path: str) -> "Image":
        """
        Read a PPM (plain or binary) or PNG file through Pillow.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If Pillow cannot decode it
        """
        if not os.path.exists(path):
            raise FileNotFoundError(f"Image file not found: {path}")
        try:
            with PILImage.open(path) as img:
                if img.mode != 'RGB':
                    img = img.convert('RGB')
                data = np.array(img, dtype=np.uint8)
        except OSError as e:
            raise ValueError(f"Error loading image {path}: {e}") from e
        return cls.from_array(data)

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    def put_pixel(self, x: int, y: int, color: Color):
        if x < 0 or x >= self.width or y < 0 or y >= self.height:
            return
        self.data[y, x] = (color.r, color.g, color.b)

    def get_pixel(self, x: int, y: int) -> Color:
        r, g, b = self.data[y, x]
        return Color(int(r), int(g), int(b))

    def pixels(self) -> Iterator[Color]:
        """Iterate over every pixel in row-major order."""
        for r, g, b in self.data.reshape(-1, 3):
            yield Color(int(r), int(g), int(b))

    def save_ppm(self, path: str, verbose: bool = True):
        """
        Write a plain-text PPM (P3): header, size, max value, then one
        "R G B" line per pixel. I/O errors propagate to the caller.
        """
        with open(path, "w") as f:
            f.write(f"P3\n{self.width} {self.height}\n255\n")
            for r, g, b in self.data.reshape(-1, 3).tolist():
                f.write(f"{r} {g} {b}\n")
        if verbose:
            print(f"Saved: {path}")

    def save_png(self, path: str, verbose: bool = True):
        PILImage.fromarray(self.data).save(path)
        if verbose:
            print(f"Saved: {path}")

    def __eq__(self, other) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return np.array_equal(self.data, other.data)

    def __repr__(self) -> str:
        return f"Image({self.width}x{self.height})"
