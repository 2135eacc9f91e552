import pytest
from mister.formats import RgbaChannel, RgbaImage


@pytest.fixture
def rgba_2x2() -> RgbaImage:
    """Fresh 2x2 RGBA image, all channels invisible."""
    return RgbaImage(2, 2)


@pytest.fixture
def visible_rgba_3x2() -> RgbaImage:
    """3x2 RGBA image with every channel visible."""
    img = RgbaImage(3, 2)
    for name in RgbaChannel:
        img.set_channel_visible(name, True)
    return img
