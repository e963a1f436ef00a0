from dataclasses import dataclass
from pathlib import Path


@dataclass
class FillConfig:
    image: Path
    """Image file to fill"""

    x: int
    """Seed column"""

    y: int
    """Seed row"""

    color: str = "#000000"
    """Fill color as RRGGBB or #RRGGBB"""

    tolerance: float = 0.0
    """How far (in percent of the seed color) a pixel may differ and still be filled"""

    output: Path | None = None
    """Where to write the result, defaults to overwriting `image`"""

    verbose: bool = False
