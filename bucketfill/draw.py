"""
RGBA bitmap canvas using a simple 1D byte buffer.

`PixelCanvas` treats `array` as a flat, mutable 1D buffer representing a
`w` by `h` bitmap in row-major order, four bytes (R, G, B, A) per pixel.
Pixel (x, y) starts at index `(y * w + x) * 4`.
"""

import array
from collections.abc import Buffer, MutableSequence
from typing import Final

from .color import Color, parse_color
from .fill import flood_fill

RGBA = tuple[int, int, int, int]


class PixelCanvas:
    """A minimal RGBA canvas backed by a 1D byte buffer.

    - `array` is modified in-place.
    - Coordinates are 0-based, with origin at top-left.
    - Starts out transparent black.
    """

    def __init__(self, w: int, h: int) -> None:
        self.array: Final = array.array("B", bytes(w * h * 4))
        self.width: int = w
        self.height: int = h

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _index(self, x: int, y: int) -> int:
        return (y * self.width + x) * 4

    def get_pixels(self) -> MutableSequence[int]:
        return self.array

    def flush(self) -> None:
        """Nothing to write back, the buffer is the canvas."""

    def set_pixels(self, data: Buffer) -> None:
        pixels = array.array("B", bytes(data))
        if len(pixels) != len(self.array):
            raise ValueError(
                f"Got {len(pixels)} bytes, expected {len(self.array)} for {self.width}x{self.height}"
            )
        self.array[:] = pixels

    def clear(self, color: str | Color) -> None:
        col = parse_color(color)
        self.array[:] = array.array("B", bytes((*col, 255)) * (self.width * self.height))

    def get_pixel(self, x: int, y: int) -> RGBA:
        i = self._index(x, y)
        r, g, b, a = self.array[i : i + 4]
        return r, g, b, a

    def set_pixel(self, x: int, y: int, color: str | Color) -> None:
        if self._in_bounds(x, y):
            i = self._index(x, y)
            self.array[i : i + 4] = array.array("B", (*parse_color(color), 255))

    def draw_line(
        self, x0: int, y0: int, x1: int, y1: int, color: str | Color
    ) -> None:
        """Draw a line from (x0, y0) to (x1, y1) using Bresenham's algorithm.

        - Writes only to in-bounds pixels.
        """
        col = parse_color(color)

        dx = abs(x1 - x0)
        sx = 1 if x0 < x1 else -1
        dy = -abs(y1 - y0)
        sy = 1 if y0 < y1 else -1
        err = dx + dy  # error term

        while True:
            self.set_pixel(x0, y0, col)
            if x0 == x1 and y0 == y1:
                break
            e2 = 2 * err
            if e2 >= dy:
                err += dy
                x0 += sx
            if e2 <= dx:
                err += dx
                y0 += sy

    def flood_fill(
        self, x: int, y: int, color: str | Color, tolerance: float = 0
    ) -> None:
        """Fill the region around (x, y), see `bucketfill.fill.flood_fill`."""
        flood_fill(x, y, self, color, tolerance)
