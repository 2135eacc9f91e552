from .base import ImageFormat, PlanarImageFormat
from .errors import (
    FormatInvariantError,
    InvalidData,
    MissingDataError,
    OutOfBoundsError,
    PixelError,
)
from .rgba import RgbaChannel, RgbaImage

__all__ = [
    "ImageFormat",
    "PlanarImageFormat",
    "FormatInvariantError",
    "InvalidData",
    "MissingDataError",
    "OutOfBoundsError",
    "PixelError",
    "RgbaChannel",
    "RgbaImage",
]
