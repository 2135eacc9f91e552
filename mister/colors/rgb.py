from typing import ClassVar, Tuple
from ..types.format_type import FormatType
from ..types.color_types import RGBATuple
from .color_base import ColorBase, WithAlpha


class ColorRGBAINT(ColorBase, WithAlpha):
    __slots__ = ()
    num_channels: ClassVar[int] = 4
    _type: ClassVar[type] = int
    maxima: ClassVar[Tuple[int, int, int, int]] = (255, 255, 255, 255)
    format_type: ClassVar[FormatType] = FormatType.INT

    def to_unit(self) -> "ColorUnitRGBA":
        return ColorUnitRGBA(self)


class ColorUnitRGBA(ColorBase, WithAlpha):
    """Normalized float RGBA color, each component nominally in [0.0, 1.0]."""
    __slots__ = ()
    num_channels: ClassVar[int] = 4
    _type: ClassVar[type] = float
    maxima: ClassVar[Tuple[float, float, float, float]] = (1.0, 1.0, 1.0, 1.0)
    format_type: ClassVar[FormatType] = FormatType.FLOAT

    @classmethod
    def from_components(cls, r: float, g: float, b: float, a: float = 1.0) -> "ColorUnitRGBA":
        return cls((r, g, b, a))

    @property
    def components(self) -> RGBATuple:
        return self.value  # type: ignore[return-value]

    def to_int(self) -> ColorRGBAINT:
        """8-bit version of this color; out-of-range components are clamped first."""
        return ColorRGBAINT(self.clamped())


RGBA = ColorRGBAINT
UnitRGBA = ColorUnitRGBA
