import pytest
from mister.image import Channel, Image


def test_image_starts_empty():
    img = Image(5)
    assert img.count() == 0
    assert len(img) == 5
    assert img.channel(0) is None


def test_image_single_channel():
    img = Image(5)
    # the value passed is the DEFAULT value, the Image argument is the size
    idx = img.create_channel(0)
    assert idx == 0
    assert img.count() == 1
    img[0].write(1, 21)
    assert list(img.channel(0)) == [0, 21, 0, 0, 0]


def test_image_double_channel():
    img = Image(5)
    img.create_channel(0)
    assert img.create_channel(1) == 1
    assert img.count() == 2
    img.channel_mut(0).write(1, 21)
    img[1].write(2, 22)
    assert list(img.channel(0)) == [0, 21, 0, 0, 0]
    assert list(img[1]) == [1, 1, 22, 1, 1]


def test_image_channel_length():
    img = Image(5)
    img.create_channel(())
    img.create_channel(())
    assert len(img) == len(img[0])
    assert len(img) == len(img[1])


def test_created_channel_is_owned():
    img = Image(3)
    img.create_channel(0.0)
    assert isinstance(img[0], Channel)
    assert img.channel(0) is img.channel_mut(0)
    assert img.channels == (img[0],)


def test_channel_out_of_range():
    img = Image(3)
    img.create_channel(0)
    assert img.channel(1) is None
    assert img.channel(-1) is None
    with pytest.raises(IndexError):
        img[1]
    with pytest.raises(IndexError):
        img[-1]


def test_negative_length_rejected():
    with pytest.raises(ValueError):
        Image(-3)


class TestImageResize:
    def test_resize_shrink(self):
        img = Image(5)
        img.create_channel(0)
        img.create_channel(1)
        img.resize(3)
        assert len(img) == 3
        assert all(len(chan) == 3 for chan in img.channels)

    def test_resize_grow_fills_defaults(self):
        img = Image(2)
        img.create_channel(0)
        img.create_channel(7)
        img[0].write(1, 5)
        img.resize(4)
        assert list(img[0]) == [0, 5, 0, 0]
        assert list(img[1]) == [7, 7, 7, 7]

    def test_resize_to_zero_and_back(self):
        img = Image(4)
        img.create_channel(2)
        img[0].write(0, 9)
        img.resize(0)
        assert len(img) == 0
        assert len(img[0]) == 0
        img.resize(3)
        assert list(img[0]) == [2, 2, 2]

    def test_channel_created_after_resize(self):
        img = Image(2)
        img.create_channel(0)
        img.resize(6)
        img.create_channel(1)
        assert len(img[0]) == len(img[1]) == 6

    def test_resize_without_channels(self):
        img = Image(2)
        img.resize(10)
        assert len(img) == 10
        img.create_channel(0)
        assert len(img[0]) == 10


def test_copy_is_independent():
    img = Image(3)
    img.create_channel(0)
    clone = img.copy()
    clone[0].write(0, 4)
    assert img[0].get(0) == 0
    assert clone.count() == 1
    assert len(clone) == 3
