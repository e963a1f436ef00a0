"""
Scanline flood fill with color tolerance on flat RGBA buffers.

The buffer holds `width * height` pixels in row-major order, four bytes each
(R, G, B, A). Pixel `(x, y)` starts at index `(y * width + x) * 4`.

The fill walks vertical spans: each point popped from the seed stack is moved
up to the top of its run of fillable pixels, then the run is filled downwards
while branch points for the columns on either side are pushed. No recursion is
used, so memory is bounded by the number of pending spans.
"""

import math
from collections.abc import MutableSequence
from dataclasses import dataclass
from logging import getLogger
from typing import NamedTuple, Protocol

from .color import Color, parse_color
from .errors import InvalidSeed, InvalidTolerance

logger = getLogger(__name__)


class Surface(Protocol):
    """Anything with a live RGBA buffer that can be written back for display."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def get_pixels(self) -> MutableSequence[int]: ...

    def flush(self) -> None: ...


class Point(NamedTuple):
    x: int
    y: int


@dataclass(frozen=True)
class ToleranceWindow:
    """Inclusive per-channel (r, g, b) bounds."""

    low: tuple[float, float, float]
    high: tuple[float, float, float]

    def contains(self, r: int, g: int, b: int) -> bool:
        lo, hi = self.low, self.high
        return lo[0] <= r <= hi[0] and lo[1] <= g <= hi[1] and lo[2] <= b <= hi[2]


def tolerance_window(seed: Color, tolerance: float) -> ToleranceWindow:
    """Build the acceptance window around `seed`.

    Each channel accepts `c - c * t / 100` up to `c + c * t / 100`. The window
    scales with the channel value itself, so a channel that is 0 in the seed
    only ever accepts 0, whatever the tolerance.
    """
    f = tolerance / 100
    low = (seed.r - seed.r * f, seed.g - seed.g * f, seed.b - seed.b * f)
    high = (seed.r + seed.r * f, seed.g + seed.g * f, seed.b + seed.b * f)
    return ToleranceWindow(low, high)


@dataclass
class FillContext:
    """State for a single fill call."""

    pixels: MutableSequence[int]
    width: int
    height: int
    window: ToleranceWindow
    fill_color: Color
    filled: int = 0
    spans: int = 0

    def is_fillable(self, x: int, y: int) -> bool:
        i = (y * self.width + x) * 4
        rgb = (self.pixels[i], self.pixels[i + 1], self.pixels[i + 2])
        return self.window.contains(*rgb) and rgb != self.fill_color

    def fill_at(self, x: int, y: int) -> None:
        i = (y * self.width + x) * 4
        p = self.pixels
        p[i], p[i + 1], p[i + 2] = self.fill_color
        p[i + 3] = 255
        self.filled += 1


def scanline_fill(ctx: FillContext, seed: Point) -> None:
    stack: list[Point] = [seed]
    w, h = ctx.width, ctx.height

    while stack:
        x, y = stack.pop()
        ctx.spans += 1

        # Find top of the run
        while y >= 0 and ctx.is_fillable(x, y):
            y -= 1
        y += 1

        reach_left = False
        reach_right = False
        while y < h and ctx.is_fillable(x, y):
            ctx.fill_at(x, y)

            if x > 0:
                if ctx.is_fillable(x - 1, y):
                    if not reach_left:
                        stack.append(Point(x - 1, y))
                        reach_left = True
                else:
                    reach_left = False

            if x < w - 1:
                if ctx.is_fillable(x + 1, y):
                    if not reach_right:
                        stack.append(Point(x + 1, y))
                        reach_right = True
                else:
                    # Bridge a one pixel gap to the upper right. Only needed
                    # when no right run is pending; reach_left stays untouched
                    # so a left run starting on this row is still queued.
                    if not reach_right and y > 0 and ctx.is_fillable(x + 1, y - 1):
                        stack.append(Point(x + 1, y - 1))
                    reach_right = False

            y += 1


def _check_tolerance(tolerance: float) -> None:
    if isinstance(tolerance, bool) or not isinstance(tolerance, (int, float)):
        raise InvalidTolerance(f"Tolerance must be a number, got {tolerance!r}")
    if math.isnan(tolerance) or not 0 <= tolerance <= 100:
        raise InvalidTolerance(f"Tolerance {tolerance} not in [0, 100]")


def _check_seed(x: int, y: int, width: int, height: int) -> None:
    for v in (x, y):
        if isinstance(v, bool) or not isinstance(v, int):
            raise InvalidSeed(f"Seed coordinates must be integers, got ({x!r}, {y!r})")
    if not (0 <= x < width and 0 <= y < height):
        raise InvalidSeed(f"Seed ({x}, {y}) outside {width}x{height} surface")


def fill_pixels(
    pixels: MutableSequence[int],
    width: int,
    height: int,
    x: int,
    y: int,
    color: str | Color,
    tolerance: float = 0,
) -> None:
    """Flood fill a raw RGBA buffer in place.

    - Pixels whose color is inside the tolerance window of the seed pixel, and
      connected to it, are set to `color` with alpha 255.
    - All arguments are checked before the buffer is modified.
    """
    if len(pixels) != width * height * 4:
        raise ValueError(
            f"Buffer holds {len(pixels)} bytes, expected {width * height * 4} for {width}x{height}"
        )
    _check_seed(x, y, width, height)
    fill_color = parse_color(color)
    _check_tolerance(tolerance)

    i = (y * width + x) * 4
    start_color = Color(pixels[i], pixels[i + 1], pixels[i + 2])
    if start_color == fill_color:
        return

    ctx = FillContext(
        pixels, width, height, tolerance_window(start_color, tolerance), fill_color
    )
    scanline_fill(ctx, Point(x, y))
    logger.debug(
        f"Filled {ctx.filled} pixels with {fill_color.hex} from ({x}, {y}), {ctx.spans} spans"
    )


def flood_fill(
    x: int, y: int, surface: Surface, color: str | Color, tolerance: float = 0
) -> None:
    """Flood fill `surface` starting at (x, y).

    The surface buffer is modified in place; calling `surface.flush()` to show
    the result is left to the caller.
    """
    fill_pixels(
        surface.get_pixels(), surface.width, surface.height, x, y, color, tolerance
    )
