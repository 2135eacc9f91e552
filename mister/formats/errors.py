from __future__ import annotations
from typing import Any, Generic, Hashable

from ..types.color_types import T


class InvalidData(ValueError, Generic[T]):
    """
    A sample outside the range a format declares.

    Raised by ``ImageFormat.validate``. Recoverable: the caller decides whether
    the image should be rejected.

    Attributes:
        value: The offending sample
        lower: Lower bound of the declared range
        upper: Upper bound of the declared range
        inclusive: Whether the bounds themselves are valid samples
    """

    def __init__(self, value: T, lower: T, upper: T, inclusive: bool = True) -> None:
        self.value = value
        self.lower = lower
        self.upper = upper
        self.inclusive = inclusive
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.inclusive:
            return f"got {self.value}, expected value in [{self.lower}, {self.upper}]"
        return f"got {self.value}, expected value in ({self.lower}, {self.upper})"

    def __repr__(self) -> str:
        return (
            f"InvalidData({self.value!r}, {self.lower!r}, {self.upper!r}, "
            f"inclusive={self.inclusive!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InvalidData):
            return NotImplemented
        return (self.value, self.lower, self.upper, self.inclusive) == (
            other.value, other.lower, other.upper, other.inclusive
        )

    __hash__ = Exception.__hash__


class PixelError(Exception):
    """Base class for recoverable errors from ``pixel`` and ``set_pixel``."""


class OutOfBoundsError(PixelError, IndexError):
    """Coordinates outside the format's width/height."""

    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y
        super().__init__(f"pixel ({x}, {y}) is out of bounds")


class MissingDataError(PixelError, LookupError):
    """A channel has no sample at the storage index mapped from ``(x, y)``."""

    def __init__(self, channel: Hashable, x: int, y: int) -> None:
        self.channel = channel
        self.x = x
        self.y = y
        super().__init__(f"channel {_channel_label(channel)} has no data at ({x}, {y})")


class FormatInvariantError(RuntimeError):
    """
    A format's own construction is broken, e.g. a channel name that maps to no
    channel. This is a bug in the format class; it is never raised for bad input.
    """


def _channel_label(channel: Any) -> str:
    return getattr(channel, "name", None) or str(channel)
