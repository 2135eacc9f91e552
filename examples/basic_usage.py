"""Basic mister usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from mister import ColorUnitRGBA, Image, InvalidData, OutOfBoundsError, RgbaChannel, RgbaImage


def demonstrate_storage() -> None:
    # Raw storage: channels of equal length, no color model.
    image = Image(4)
    image.create_channel(0)
    image.create_channel(255)
    image[0].write(2, 7)
    print("channel 0:", list(image[0]))
    image.resize(6)
    print("after resize:", [list(chan) for chan in image.channels])


def demonstrate_rgba() -> None:
    img = RgbaImage(2, 2)
    img.set_channel_visible(RgbaChannel.RED, True)
    img.set_pixel(1, 0, ColorUnitRGBA((0.5, 0.0, 0.0, 1.0)))
    print("pixel (1, 0):", img.pixel(1, 0).value)
    print("pixel (0, 0):", img.pixel(0, 0).value)
    print("data:", img.data())

    try:
        img.pixel(2, 0)
    except OutOfBoundsError as e:
        print("out of bounds:", e)

    img.channel_mut(RgbaChannel.GREEN).write(3, 1.5)
    try:
        img.validate()
    except InvalidData as e:
        print("invalid:", e)


def demonstrate_arrays() -> None:
    arr = np.zeros((2, 3, 4), dtype=np.float32)
    arr[..., 3] = 1.0
    arr[0, 1, 0] = 1.0
    img = RgbaImage.from_array(arr)
    for name in RgbaChannel:
        img.set_channel_visible(name, True)
    print(img)
    print("pixel (1, 0):", img.pixel(1, 0).value)


if __name__ == "__main__":
    demonstrate_storage()
    demonstrate_rgba()
    demonstrate_arrays()
