from __future__ import annotations
from operator import index as as_index
from typing import Generic, List, Optional, Tuple
import numpy as np

from ..types.color_types import T
from .channel import Channel


class Image(Generic[T]):
    """
    An ordered group of equal-length channels.

    An ``Image`` carries no color model; formats decide what each channel
    means. Channel identity is its index, which is its creation order.
    Every channel always has exactly ``len(image)`` elements.
    """
    __slots__ = ("_channels", "_len")

    def __init__(self, length: int) -> None:
        length = as_index(length)
        if length < 0:
            raise ValueError(f"Image length must be non-negative, got {length}")
        self._channels: List[Channel[T]] = []
        self._len = length

    def create_channel(self, default: T, dtype: Optional[np.dtype] = None) -> int:
        """
        Append a channel of the current length filled with ``default``.

        Returns:
            Index of the new channel.
        """
        self._channels.append(Channel(default, self._len, dtype))
        return len(self._channels) - 1

    def channel(self, i: int) -> Optional[Channel[T]]:
        """Channel at index ``i``, or ``None`` if there is none."""
        i = as_index(i)
        if 0 <= i < len(self._channels):
            return self._channels[i]
        return None

    # Channels are mutable objects; both accessors hand out the same one.
    channel_mut = channel

    def count(self) -> int:
        return len(self._channels)

    def __len__(self) -> int:
        return self._len

    @property
    def channels(self) -> Tuple[Channel[T], ...]:
        return tuple(self._channels)

    def resize(self, new_length: int) -> None:
        """Set the image length and resize every channel to match."""
        new_length = as_index(new_length)
        if new_length < 0:
            raise ValueError(f"Image length must be non-negative, got {new_length}")
        self._len = new_length
        for chan in self._channels:
            chan._resize(new_length)

    def __getitem__(self, i: int) -> Channel[T]:
        chan = self.channel(i)
        if chan is None:
            raise IndexError(f"channel {i} out of range for image with {self.count()} channels")
        return chan

    def copy(self) -> Image[T]:
        clone: Image[T] = Image(self._len)
        clone._channels = [chan.copy() for chan in self._channels]
        return clone

    def __repr__(self) -> str:
        return f"Image(length={self._len}, channels={self.count()})"
