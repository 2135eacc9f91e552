"""
Tests for the ImageFormat contract using small formats declared here, so the
generic machinery is exercised apart from RgbaImage.
"""
from enum import Enum
from typing import ClassVar, Tuple

import pytest
from mister.colors import ColorBase, WithAlpha
from mister.formats import (
    FormatInvariantError,
    ImageFormat,
    InvalidData,
    PlanarImageFormat,
    RgbaChannel,
    RgbaImage,
)
from mister.types import FormatType


class GrayChannel(Enum):
    LUMA = 0
    ALPHA = 1


class ColorGrayA(ColorBase, WithAlpha):
    __slots__ = ()
    num_channels: ClassVar[int] = 2
    _type: ClassVar[type] = float
    maxima: ClassVar[Tuple[float, float]] = (1.0, 1.0)
    format_type: ClassVar[FormatType] = FormatType.FLOAT


class GrayAlphaImage(PlanarImageFormat[GrayChannel]):
    ChannelName = GrayChannel
    # physical order differs from component order on purpose
    channel_indices = {GrayChannel.ALPHA: 0, GrayChannel.LUMA: 1}
    channel_defaults = {GrayChannel.LUMA: 0.5, GrayChannel.ALPHA: 1.0}
    color_class = ColorGrayA


class GappedImage(PlanarImageFormat[GrayChannel]):
    ChannelName = GrayChannel
    channel_indices = {GrayChannel.LUMA: 0, GrayChannel.ALPHA: 2}
    channel_defaults = {GrayChannel.LUMA: 0.0, GrayChannel.ALPHA: 1.0}
    color_class = ColorGrayA


def test_contract_is_abstract():
    with pytest.raises(TypeError):
        ImageFormat()  # type: ignore[abstract]


def test_planar_formats_implement_contract():
    assert isinstance(RgbaImage(1, 1), ImageFormat)
    assert isinstance(GrayAlphaImage(1, 1), ImageFormat)


def test_mapping_resolves_physical_index():
    img = GrayAlphaImage(2, 2)
    assert img.channel_count() == 2
    assert img.channel(GrayChannel.ALPHA).default == 1.0
    assert img.channel(GrayChannel.LUMA).default == 0.5
    assert img.channel(GrayChannel.ALPHA) is img._image[0]
    assert img.channel(GrayChannel.LUMA) is img._image[1]


def test_component_order_follows_channel_names():
    img = GrayAlphaImage(2, 1)
    img.set_channel_visible(GrayChannel.LUMA, True)
    img.set_channel_visible(GrayChannel.ALPHA, True)
    img.set_pixel(1, 0, ColorGrayA((0.25, 0.75)))
    assert img.pixel(1, 0).value == (0.25, 0.75)
    assert img.channel(GrayChannel.LUMA).get(1) == 0.25
    assert img.data() == [(0.5, 1.0), (0.25, 0.75)]


def test_invisible_default_substitute():
    img = GrayAlphaImage(1, 1)
    img.channel_mut(GrayChannel.LUMA).write(0, 0.0)
    assert img.pixel(0, 0).value == (0.5, 1.0)


def test_validate_scans_physical_order():
    img = GrayAlphaImage(2, 1)
    img.channel_mut(GrayChannel.LUMA).write(0, 5.0)
    img.channel_mut(GrayChannel.ALPHA).write(1, 7.0)
    # ALPHA is physical channel 0, so it is scanned first
    with pytest.raises(InvalidData) as info:
        img.validate()
    assert info.value.value == 7.0


def test_gapped_mapping_is_an_invariant_violation():
    with pytest.raises(FormatInvariantError, match="declared at index 2"):
        GappedImage(1, 1)


class TestNameResolution:
    def test_foreign_name(self):
        img = RgbaImage(1, 1)
        with pytest.raises(FormatInvariantError, match="no channel named"):
            img.channel(GrayChannel.LUMA)

    def test_foreign_name_visibility(self):
        img = GrayAlphaImage(1, 1)
        with pytest.raises(FormatInvariantError):
            img.set_channel_visible(RgbaChannel.RED, True)
        with pytest.raises(FormatInvariantError):
            img.is_channel_visible("luma")

    def test_invariant_error_is_not_pixel_error(self):
        assert not issubclass(FormatInvariantError, (InvalidData, LookupError, IndexError))
