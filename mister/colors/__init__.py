"""
Mister Color Values
===================

Immutable color values handed across the image-format boundary. A format's
``pixel`` composes one from its channels and ``set_pixel`` decomposes one back
into per-channel samples.

Usage
-----
>>> from mister.colors import ColorUnitRGBA
>>> c = ColorUnitRGBA((0.5, 0.0, 0.0, 1.0))
>>> c.value
(0.5, 0.0, 0.0, 1.0)
>>> c.with_alpha(0.25).alpha
0.25

Notes
-----
- Instances are frozen after initialization
- Float components are rounded to float32, the sample type of float images,
  so a value written to an image reads back unchanged
- Components are not clamped on construction; use ``clamped()``
"""

from .color_base import ColorBase, WithAlpha
from .rgb import ColorRGBAINT, ColorUnitRGBA, RGBA, UnitRGBA

__all__ = ['ColorBase', 'WithAlpha', 'ColorRGBAINT', 'ColorUnitRGBA', 'RGBA', 'UnitRGBA']
