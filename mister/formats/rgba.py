from __future__ import annotations
from enum import Enum
from typing import ClassVar, Dict

from ..colors.rgb import ColorUnitRGBA
from ..types.format_type import FormatType
from .base import PlanarImageFormat


class RgbaChannel(str, Enum):
    """The channels of an RGBA image, in component order."""
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    ALPHA = "alpha"


# Our RgbaImage uses channels to store pixel information like this
# 0 ----------------> width-1
# width ------------> 2*width-1
# 2*width ----------> 3*width-1
# ... --------------> ...
# (height-1)*width -> height*width-1
class RgbaImage(PlanarImageFormat[RgbaChannel]):
    """
    Four float32 channels (red, green, blue, alpha) with samples in [0.0, 1.0].

    New images are opaque black: color channels start at 0.0 and
    alpha at 1.0. Every channel starts invisible, so ``pixel`` returns
    ``(0, 0, 0, 1)`` until channels are made visible.

    Example
    -------
    >>> img = RgbaImage(2, 2)
    >>> img.set_channel_visible(RgbaChannel.RED, True)
    >>> img.set_pixel(1, 0, ColorUnitRGBA((0.5, 0.0, 0.0, 1.0)))
    >>> img.pixel(1, 0).value
    (0.5, 0.0, 0.0, 1.0)
    >>> img.pixel(0, 0).value
    (0.0, 0.0, 0.0, 1.0)
    """

    ChannelName: ClassVar[type[RgbaChannel]] = RgbaChannel
    channel_indices: ClassVar[Dict[RgbaChannel, int]] = {
        RgbaChannel.RED: 0,
        RgbaChannel.GREEN: 1,
        RgbaChannel.BLUE: 2,
        RgbaChannel.ALPHA: 3,
    }
    channel_defaults: ClassVar[Dict[RgbaChannel, float]] = {
        RgbaChannel.RED: 0.0,
        RgbaChannel.GREEN: 0.0,
        RgbaChannel.BLUE: 0.0,
        RgbaChannel.ALPHA: 1.0,
    }
    sample_format: ClassVar[FormatType] = FormatType.FLOAT
    color_class: ClassVar[type[ColorUnitRGBA]] = ColorUnitRGBA

    def pixel(self, x: int, y: int) -> ColorUnitRGBA:
        return super().pixel(x, y)  # type: ignore[return-value]


__all__ = ["RgbaChannel", "RgbaImage"]
