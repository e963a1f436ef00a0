"""Errors raised when fill arguments are rejected.

All of them are raised before the pixel buffer is touched.
"""


class FillError(ValueError):
    pass


class InvalidSeed(FillError):
    """Seed point is not inside the surface."""


class InvalidColorSpec(FillError):
    """Color string is not six hex digits (optionally prefixed with '#')."""


class InvalidTolerance(FillError):
    """Tolerance is not a percentage in [0, 100]."""
