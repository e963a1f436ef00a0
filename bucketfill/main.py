#!/usr/bin/env python
import logging
import sys
from typing import cast

import jsonargparse
from PIL import UnidentifiedImageError

from .errors import FillError
from .fill import flood_fill
from .fill_config import FillConfig
from .image_surface import ImageSurface

logger = logging.getLogger()


def main(args: list[str] | None = None):
    jsonargparse.set_parsing_settings(docstring_parse_attribute_docstrings=True)

    config = cast(
        "FillConfig",
        jsonargparse.auto_cli(FillConfig, args=args, as_positional=True),  # pyright: ignore[reportUnknownMemberType]
    )
    if config.verbose:
        logger.setLevel(logging.DEBUG)

    try:
        surface = ImageSurface.open(config.image)
    except (FileNotFoundError, UnidentifiedImageError) as e:
        logger.error(f"Could not load {config.image}: {e}")
        sys.exit(1)

    try:
        flood_fill(config.x, config.y, surface, config.color, config.tolerance)
    except FillError as e:
        logger.error(f"Fill failed: {e}")
        sys.exit(1)

    surface.flush()
    surface.save(config.output or config.image)


if __name__ == "__main__":
    main()
