import re
from typing import NamedTuple

from .errors import InvalidColorSpec

_HEX_COLOR = re.compile(r"#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")


class Color(NamedTuple):
    r: int
    g: int
    b: int

    @classmethod
    def from_hex(cls, spec: str) -> "Color":
        """Decode 'RRGGBB' or '#RRGGBB'."""
        m = _HEX_COLOR.fullmatch(spec.strip()) if isinstance(spec, str) else None
        if m is None:
            raise InvalidColorSpec(f"Not a hex color: {spec!r}")
        return cls(*(int(part, 16) for part in m.groups()))

    @property
    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


def parse_color(color: "str | Color") -> Color:
    if isinstance(color, Color):
        if not all(
            isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= 255
            for c in color
        ):
            raise InvalidColorSpec(f"Channels must be integers in [0, 255]: {color!r}")
        return color
    return Color.from_hex(color)
