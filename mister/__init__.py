"""
Mister Core - Image Storage and Formats
=======================================

The data layer of the mister image toolkit.

Key Features
------------
- Format-agnostic storage: equal-length channels grouped in an image
- Pluggable image formats mapping named channels to storage, with per-channel
  visibility and sample-range validation
- RGBA float32 format with scanline-major addressing
- Immutable color values exchanged at the format boundary

Quick Start
-----------
>>> from mister import RgbaImage, RgbaChannel, ColorUnitRGBA
>>>
>>> img = RgbaImage(4, 3)
>>> for name in RgbaChannel:
...     img.set_channel_visible(name, True)
>>> img.set_pixel(2, 1, ColorUnitRGBA((0.25, 0.5, 0.75, 1.0)))
>>> img.pixel(2, 1).value
(0.25, 0.5, 0.75, 1.0)
>>> img.validate()

Modules
-------
- image: Channel and Image storage
- formats: ImageFormat contract, RgbaImage, error types
- colors: Color value classes
- types: Format tables and type aliases
"""

from .image import Channel, ChannelIter, Image
from .colors import ColorBase, ColorRGBAINT, ColorUnitRGBA
from .formats import (
    ImageFormat,
    PlanarImageFormat,
    RgbaChannel,
    RgbaImage,
    InvalidData,
    PixelError,
    OutOfBoundsError,
    MissingDataError,
    FormatInvariantError,
)
from .types import FormatType

__version__ = "0.1.0"

__all__ = [
    # Storage
    "Channel", "ChannelIter", "Image",

    # Colors
    "ColorBase", "ColorRGBAINT", "ColorUnitRGBA",

    # Formats
    "ImageFormat", "PlanarImageFormat",
    "RgbaChannel", "RgbaImage",

    # Errors
    "InvalidData", "PixelError", "OutOfBoundsError",
    "MissingDataError", "FormatInvariantError",

    "FormatType",

    # Version
    "__version__",
]
