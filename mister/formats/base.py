"""
Image Formats
=============

An image format interprets the anonymous channels of an ``Image`` as named,
independently visible color components and exposes pixel-level access.

``ImageFormat`` is the abstract contract decoders, encoders and compositing
code program against. ``PlanarImageFormat`` implements the whole contract for
formats that store one channel per component and address pixels in
scanline order; concrete formats only declare class-level metadata, the same
way color classes declare their maxima.

Visibility
----------
Each named channel has a visibility flag, off by default. ``pixel`` reads
stored samples only for visible channels and substitutes the channel's
default for the others. ``set_pixel`` always writes every component, whatever
the flags say.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from enum import Enum
from operator import index as as_index
from typing import Any, ClassVar, Dict, Generic, List, Mapping, Optional, Sequence, Tuple
import warnings
import numpy as np
from numpy import ndarray

from ..colors.color_base import ColorBase
from ..image import Channel, Image
from ..types.color_types import ChannelNameT, ValidationErrorT
from ..types.format_type import FormatType, format_bounds, format_valid_dtypes, default_format_dtypes
from .errors import FormatInvariantError, InvalidData, MissingDataError, OutOfBoundsError


class ImageFormat(ABC, Generic[ChannelNameT, ValidationErrorT]):
    """
    Contract for interpreting an image's channels as a 2-D grid of colors.

    Generic over the format's channel-name type and the error ``validate``
    raises.
    """

    @abstractmethod
    def channel_count(self) -> int:
        """Number of physical channels in the underlying image."""

    @abstractmethod
    def set_channel_visible(self, name: ChannelNameT, enabled: bool) -> None:
        ...

    @abstractmethod
    def is_channel_visible(self, name: ChannelNameT) -> bool:
        ...

    @abstractmethod
    def channel(self, name: ChannelNameT) -> Channel:
        """Storage for the named channel."""

    @abstractmethod
    def channel_mut(self, name: ChannelNameT) -> Channel:
        ...

    @abstractmethod
    def width(self) -> int:
        ...

    @abstractmethod
    def height(self) -> int:
        ...

    @abstractmethod
    def validate(self) -> None:
        """
        Check every sample against the format's range.

        Raises:
            ValidationErrorT: for the first offending sample, scanning channels
                in creation order and each channel in index order.
        """

    @abstractmethod
    def pixel(self, x: int, y: int) -> ColorBase:
        ...

    @abstractmethod
    def set_pixel(self, x: int, y: int, color: Any) -> None:
        ...

    @abstractmethod
    def data(self) -> List[Tuple[Any, ...]]:
        """One tuple of components per storage index, in index order."""


class PlanarImageFormat(ImageFormat[ChannelNameT, InvalidData]):
    """
    One channel per named component, pixels stored in scanline order.

    Subclasses declare:
        ChannelName: Enum of the format's channel names. Its member order is
            the component order of the format's color values.
        channel_indices: Physical channel index for each name. Must cover
            every name with the indices 0..n-1.
        channel_defaults: Fill value for new samples, also substituted by
            ``pixel`` when a channel is invisible.
        sample_format: Range used by ``validate``.
        color_class: Color value type produced by ``pixel``.

    Args:
        width: Grid width in pixels.
        height: Grid height in pixels.
    """

    ChannelName: ClassVar[type[Enum]]
    channel_indices: ClassVar[Mapping[Any, int]]
    channel_defaults: ClassVar[Mapping[Any, float]]
    sample_format: ClassVar[FormatType] = FormatType.FLOAT
    color_class: ClassVar[type[ColorBase]]

    def __init__(self, width: int, height: int) -> None:
        width = as_index(width)
        height = as_index(height)
        if width < 0 or height < 0:
            raise ValueError(f"width and height must be non-negative, got {width}x{height}")
        self._width = width
        self._height = height

        dtype = default_format_dtypes[self.sample_format]
        self._image: Image = Image(width * height)
        for name in sorted(self.channel_indices, key=self.channel_indices.__getitem__):
            idx = self._image.create_channel(self.channel_defaults[name], dtype)
            if idx != self.channel_indices[name]:
                raise FormatInvariantError(
                    f"{self.__class__.__name__}: channel {name!r} declared at index "
                    f"{self.channel_indices[name]} but created at {idx}"
                )
        self._visible: Dict[Any, bool] = {name: False for name in self.ChannelName}

    # ------------------ NAME RESOLUTION ------------------
    def _resolve(self, name: ChannelNameT) -> int:
        try:
            return self.channel_indices[name]
        except KeyError:
            raise FormatInvariantError(
                f"{self.__class__.__name__} has no channel named {name!r}"
            ) from None

    def channel(self, name: ChannelNameT) -> Channel:
        chan = self._image.channel(self._resolve(name))
        if chan is None:
            raise FormatInvariantError(f"{self.__class__.__name__} internal error: missing channel {name!r}")
        return chan

    # Channels are mutable objects; both accessors hand out the same one.
    def channel_mut(self, name: ChannelNameT) -> Channel:
        return self.channel(name)

    def channel_count(self) -> int:
        return self._image.count()

    # ------------------ VISIBILITY ------------------
    def set_channel_visible(self, name: ChannelNameT, enabled: bool) -> None:
        self._resolve(name)
        self._visible[name] = bool(enabled)

    def is_channel_visible(self, name: ChannelNameT) -> bool:
        self._resolve(name)
        return self._visible[name]

    def visible_channels(self) -> Tuple[ChannelNameT, ...]:
        return tuple(name for name in self.ChannelName if self._visible[name])  # type: ignore[misc]

    # ------------------ GEOMETRY ------------------
    def width(self) -> int:
        return self._width

    def height(self) -> int:
        return self._height

    def pixel_index(self, x: int, y: int) -> int:
        """Storage index of ``(x, y)``; row-major with the origin at the top left."""
        return y * self._width + x

    def _check_bounds(self, x: int, y: int) -> int:
        x = as_index(x)
        y = as_index(y)
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise OutOfBoundsError(x, y)
        return self.pixel_index(x, y)

    # ------------------ VALIDATION ------------------
    def first_invalid(self) -> Optional[InvalidData]:
        """
        Find the first out-of-range sample without raising.

        Channels are scanned in creation order, each from index 0. NaN is
        never in range.

        Returns:
            The error ``validate`` would raise, or None if every sample is valid.
        """
        lower, upper = format_bounds[self.sample_format]
        for chan in self._image.channels:
            samples = chan.to_numpy()
            in_range = np.asarray((samples >= lower) & (samples <= upper), dtype=bool)
            bad = np.flatnonzero(~in_range)
            if bad.size:
                return InvalidData(chan[int(bad[0])], lower, upper, True)
        return None

    def validate(self) -> None:
        error = self.first_invalid()
        if error is not None:
            raise error

    def is_valid(self) -> bool:
        return self.first_invalid() is None

    # ------------------ PIXELS ------------------
    def pixel(self, x: int, y: int) -> ColorBase:
        """
        Compose the color at ``(x, y)``.

        Raises:
            OutOfBoundsError: if ``x >= width()`` or ``y >= height()``
            MissingDataError: if a visible channel has no sample at the pixel
        """
        loc = self._check_bounds(x, y)
        components = []
        for name in self.ChannelName:
            if self._visible[name]:
                value = self.channel(name).get(loc)
                if value is None:
                    raise MissingDataError(name, x, y)
            else:
                value = self.channel_defaults[name]
            components.append(value)
        return self.color_class(tuple(components))

    def set_pixel(self, x: int, y: int, color: ColorBase | Sequence[float]) -> None:
        """
        Write every component of ``color`` at ``(x, y)``.

        Visibility flags are not consulted; hidden channels are written too.

        Raises:
            OutOfBoundsError: if ``x >= width()`` or ``y >= height()``
            MissingDataError: if a channel has no sample at the pixel
        """
        loc = self._check_bounds(x, y)
        if not isinstance(color, self.color_class):
            color = self.color_class(color)
        for name, component in zip(self.ChannelName, color.value):
            chan = self.channel(name)
            if loc >= len(chan):
                raise MissingDataError(name, x, y)
            chan.write(loc, component)

    def data(self) -> List[Tuple[Any, ...]]:
        return list(zip(*(self.channel(name) for name in self.ChannelName)))

    # ------------------ NUMPY INTEROP ------------------
    def to_array(self) -> ndarray:
        """
        Stored samples as a ``(height, width, channels)`` array, ignoring visibility.
        """
        planes = [self.channel(name).to_numpy() for name in self.ChannelName]
        return np.stack(planes, axis=-1).reshape(self._height, self._width, len(planes))

    @classmethod
    def from_array(cls, array: ndarray) -> PlanarImageFormat:
        """
        Build a format from a ``(height, width, channels)`` array.

        Float input is stored as is. Integer input is taken as 0-255 and
        normalized, with a warning. All channels of the result are invisible.
        """
        arr = np.asarray(array)
        n = len(cls.ChannelName)  # type: ignore[arg-type]
        if arr.ndim != 3 or arr.shape[-1] != n:
            raise ValueError(
                f"{cls.__name__} expects an array of shape (height, width, {n}), got {arr.shape}"
            )
        sample = arr.dtype.type(0)
        if isinstance(sample, format_valid_dtypes[FormatType.INT]) and cls.sample_format == FormatType.FLOAT:
            warnings.warn(
                f"{cls.__name__}.from_array: integer samples ({arr.dtype}) interpreted as 0-255 "
                "and normalized to [0, 1]",
                UserWarning,
                stacklevel=2,
            )
            _, int_max = format_bounds[FormatType.INT]
            arr = arr / int_max
        elif not isinstance(sample, format_valid_dtypes[cls.sample_format]):
            raise TypeError(f"{cls.__name__} cannot store samples of dtype {arr.dtype}")

        height, width = arr.shape[:2]
        fmt = cls(width, height)
        for k, name in enumerate(cls.ChannelName):
            fmt.channel(name).write_block(0, arr[..., k].reshape(-1))
        return fmt

    def __repr__(self) -> str:
        visible = ", ".join(name.name for name in self.visible_channels())  # type: ignore[attr-defined]
        return (
            f"{self.__class__.__name__}(width={self._width}, height={self._height}, "
            f"visible=[{visible}])"
        )
