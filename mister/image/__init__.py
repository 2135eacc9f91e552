"""Format-agnostic pixel storage: channels and the images that group them."""

from .channel import Channel, ChannelIter
from .image import Image

__all__ = ["Channel", "ChannelIter", "Image"]
