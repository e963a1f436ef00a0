from logging import getLogger
from pathlib import Path
from typing import Final

from PIL import Image

from .draw import PixelCanvas

logger = getLogger(__name__)


class ImageSurface(PixelCanvas):
    """A canvas holding a copy of a Pillow image's pixels.

    Drawing and filling only touch the canvas buffer; `flush()` copies the
    buffer back into `image`. `image` is always RGBA, `save()` writes it in
    the mode the source image had.
    """

    def __init__(self, image: Image.Image):
        rgba = image.convert("RGBA")
        super().__init__(rgba.width, rgba.height)
        self.mode: Final = image.mode
        self.image: Final = rgba
        self.set_pixels(rgba.tobytes())

    @classmethod
    def open(cls, path: Path | str) -> "ImageSurface":
        with Image.open(path) as img:
            logger.info(f"Loaded {path} ({img.mode} {img.width}x{img.height})")
            return cls(img)

    def flush(self) -> None:
        self.image.frombytes(self.array.tobytes())

    def save(self, path: Path | str) -> None:
        out = self.image if self.mode == "RGBA" else self.image.convert(self.mode)
        out.save(path)
        logger.info(f"Saved {path} ({out.mode})")
