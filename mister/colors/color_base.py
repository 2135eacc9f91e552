from __future__ import annotations
from typing import Any, ClassVar, Iterator, Self
from ..types.format_type import FormatType, format_bounds, format_classes, default_format_dtypes
from ..types.color_types import Scalar, ScalarVector
from abc import ABC
import numpy as np


class ColorBase:
    """
    Immutable color value exchanged with image formats.

    Subclasses only declare class-level metadata (channel count, maxima,
    format). Components are kept as given, including out-of-range values;
    range checks belong to the image format's ``validate``.
    """
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes

    num_channels: ClassVar[int] = 1
    _type:      ClassVar[type]
    maxima:     ClassVar[ScalarVector]
    format_type: ClassVar[FormatType]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ScalarVector | ColorBase) -> None:
        if self.num_channels != len(self.maxima):
            raise ValueError(f"{self.__class__.__name__} expects {self.maxima!r}-shaped maxima")

        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            if value.num_channels != self.num_channels:
                raise ValueError(
                    f"cannot build {self.__class__.__name__} from "
                    f"{value.num_channels}-channel {value.__class__.__name__}"
                )
            if value.format_type != self.format_type:
                # Rescale between formats, e.g. 0-255 ints to unit floats
                value = tuple(
                    v / src_max * dst_max
                    for v, src_max, dst_max in zip(value.value, value.maxima, self.maxima)
                )
                if self._type is int:
                    value = tuple(round(v) for v in value)
            else:
                value = value.value

        # ---- Handle tuple input ----
        value = tuple(value)
        value_dim = len(value)
        if value_dim != self.num_channels:
            raise ValueError(
                f"{self.__class__.__name__} expects {self.num_channels} components, got {value_dim}"
            )
        self._value = tuple(self._coerce(v) for v in value)

        # freeze instance: no more writes allowed
        super().__setattr__('_is_frozen', True)

    @classmethod
    def _coerce(cls, component: Any) -> Scalar:
        """Type-enforce one component; floats are rounded to their storage precision."""
        dtype = default_format_dtypes[cls.format_type]
        py_type = format_classes[cls.format_type]
        if np.issubdtype(dtype, np.floating):
            return py_type(dtype(component))
        return py_type(component)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ScalarVector:
        return self._value

    @property
    def is_in_range(self) -> bool:
        """Check whether every component lies within the format's bounds."""
        lower, _ = format_bounds[self.format_type]
        return all(lower <= v <= m for v, m in zip(self._value, self.maxima))

    def clamped(self) -> Self:
        """Return a copy with every component clamped to ``[lower, maxima]``."""
        lower, _ = format_bounds[self.format_type]
        return self.__class__(tuple(
            max(lower, min(v, m)) for v, m in zip(self._value, self.maxima)
        ))

    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return type(self) is type(other) and self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self), self._value))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r})"


class WithAlpha(ABC):
    """
    Mixin for a ColorBase subclass that includes an alpha channel.
    Assumes alpha is the *last* channel.
    """

    # Tell static checkers these come from the real subclass (ColorBase)
    __slots__ = ()
    num_channels: ClassVar[int]
    maxima: ClassVar[ScalarVector]
    value: ScalarVector

    alpha_index: ClassVar[int] = -1

    @property
    def alpha(self) -> Scalar:
        return self.value[self.alpha_index]

    def with_alpha(self, alpha: Scalar) -> Self:
        """
        Return a new instance with modified alpha channel.

        Args:
            alpha: New alpha value. Not clamped.

        Returns:
            New color instance with updated alpha.
        """
        new_vals = self.value[:-1] + (alpha,)
        return self.__class__(new_vals)  # type: ignore
