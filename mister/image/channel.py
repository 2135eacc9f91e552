"""
Channel Module
==============

A ``Channel`` is the storage for one color component of an image: a flat
numpy buffer with a fixed length and a *default* value. The default fills
the buffer on creation and every slot added later by ``resize``.

Access Modes
------------
Two access modes are provided on purpose:

- ``get(i)`` / ``get_mut(i)`` return ``None`` when ``i`` is out of range.
- ``channel[i]`` / ``channel[i] = v`` / ``write(i, v)`` raise ``IndexError``.
  These are the trusted path; an out-of-range index there is a caller bug.

Negative indices are always out of range; there is no wrap-around.

Example
-------
>>> from mister.image import Channel
>>> chan = Channel(0, 5)
>>> chan.write(1, 21)
>>> list(chan)
[0, 21, 0, 0, 0]
>>> chan.resize(2).resize(4).get(3)
0
"""
from __future__ import annotations
import copy
from operator import index as as_index
from typing import Any, Generic, Iterator, Optional
import numpy as np
from numpy import ndarray

from ..types.color_types import T
from ..utils.list_mismatch import filled_buffer, handle_buffer_size_mismatch, infer_dtype


def _to_python(value: Any) -> Any:
    if isinstance(value, np.generic):
        return value.item()
    return value


# Source kinds each buffer kind accepts. Float buffers take any real number
# and round to their precision; integer buffers reject fractions.
_ACCEPTED_KINDS = {
    "b": "b",
    "u": "biu",
    "i": "biu",
    "f": "biuf",
    "c": "biufc",
}


def _check_storable(values: Any, dtype: np.dtype) -> Any:
    """
    Convert ``values`` for storage in a ``dtype`` buffer, refusing lossy casts.

    Object buffers accept anything. Otherwise the source kind must be
    accepted by the buffer kind (no floats into integer buffers, only bools
    into bool buffers) and integers must survive the cast unchanged.

    Returns:
        ``values`` cast to ``dtype``, or ``values`` untouched for object buffers.
    Raises:
        TypeError: if the value's kind cannot be stored in ``dtype``
        ValueError: if an integer does not fit in ``dtype``
    """
    dtype = np.dtype(dtype)
    if dtype == object:
        return values
    src = np.asarray(values)
    accepted = _ACCEPTED_KINDS.get(dtype.kind, dtype.kind)
    if src.dtype.kind not in accepted:
        raise TypeError(f"cannot store {src.dtype} value {values!r} in a {dtype} channel")
    stored = src.astype(dtype)
    if dtype.kind in "biu" and not np.array_equal(stored, src):
        raise ValueError(f"value {values!r} does not fit in a {dtype} channel")
    return stored


class ChannelIter(Generic[T]):
    """
    Exact-size, restartable iteration over a channel's values.

    Each ``iter()`` call starts again from index 0; ``len()`` is known up front.
    """
    __slots__ = ("_channel",)

    def __init__(self, channel: Channel[T]) -> None:
        self._channel = channel

    def __iter__(self) -> Iterator[T]:
        channel = self._channel
        for i in range(len(channel)):
            yield channel[i]

    def __len__(self) -> int:
        return len(self._channel)

    def __length_hint__(self) -> int:
        return len(self._channel)


class Channel(Generic[T]):
    """
    Fixed-length, resizable buffer of a single sample type.

    Args:
        default: Value used to fill the buffer and any slots added by resize.
        length: Number of elements.
        dtype: Optional numpy dtype. Inferred from ``default`` when omitted;
               non-numeric defaults get an ``object`` buffer.

    Writes that cannot be stored without changing the value's kind, such as
    ``0.5`` into an integer channel, raise ``TypeError``. Object channels
    keep a private copy of the default and fill every slot with its own copy.
    """
    __slots__ = ("_data", "_default")

    def __init__(self, default: T, length: int, dtype: Optional[np.dtype] = None) -> None:
        length = as_index(length)
        if length < 0:
            raise ValueError(f"Channel length must be non-negative, got {length}")
        if dtype is None:
            dtype = infer_dtype(default)
        else:
            _check_storable(default, dtype)
        self._data: ndarray = filled_buffer(default, length, dtype)
        self._default: T = copy.deepcopy(default)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def default(self) -> T:
        """A copy of the fill value; mutating it does not affect the channel."""
        return copy.deepcopy(self._default)

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    def __len__(self) -> int:
        return self._data.shape[0]

    def _in_range(self, i: int) -> bool:
        return 0 <= i < self._data.shape[0]

    # ------------------ OPTIONAL ACCESS ------------------
    def get(self, i: int) -> Optional[T]:
        """Return the value at ``i``, or ``None`` if ``i`` is out of range."""
        i = as_index(i)
        if not self._in_range(i):
            return None
        return _to_python(self._data[i])

    def get_mut(self, i: int) -> Optional[ndarray]:
        """
        Return a writable 0-d view of slot ``i``, or ``None`` if out of range.

        Assigning through the view (``view[...] = v``) writes into the channel
        with numpy's casting rules, without the checks ``write`` applies.
        """
        i = as_index(i)
        if not self._in_range(i):
            return None
        return self._data[i, ...]

    # ------------------ STRICT ACCESS ------------------
    def __getitem__(self, i: int) -> T:
        i = as_index(i)
        if not self._in_range(i):
            raise IndexError(f"channel index {i} out of range for length {len(self)}")
        return _to_python(self._data[i])

    def __setitem__(self, i: int, value: T) -> None:
        self.write(i, value)

    def write(self, i: int, value: T) -> None:
        """Replace the value at ``i``. The length never changes."""
        i = as_index(i)
        if not self._in_range(i):
            raise IndexError(f"cannot write index {i} of channel with length {len(self)}")
        self._data[i] = _check_storable(value, self._data.dtype)

    def write_block(self, start: int, values) -> None:
        """
        Write consecutive values beginning at ``start``. The length never changes;
        a block that would run past the end, or hold values the channel cannot
        store, raises before any write.
        """
        start = as_index(start)
        if self._data.dtype == object:
            block = np.asarray(values, dtype=object).reshape(-1)
        else:
            block = _check_storable(values, self._data.dtype).reshape(-1)
        end = start + block.shape[0]
        if start < 0 or end > len(self):
            raise IndexError(f"block [{start}, {end}) out of range for channel with length {len(self)}")
        self._data[start:end] = block

    # ------------------ STRUCTURE ------------------
    def resize(self, new_length: int) -> Channel[T]:
        """
        Resize to ``new_length`` and return this channel.

        Shrinking keeps the first ``new_length`` values. Growing appends copies
        of the default given at construction, never previously truncated data.
        """
        self._resize(new_length)
        return self

    def _resize(self, new_length: int) -> None:
        new_length = as_index(new_length)
        if new_length < 0:
            raise ValueError(f"Channel length must be non-negative, got {new_length}")
        self._data = handle_buffer_size_mismatch(self._data, new_length, self._default)

    def iter(self) -> ChannelIter[T]:
        return ChannelIter(self)

    def __iter__(self) -> Iterator[T]:
        return iter(ChannelIter(self))

    def to_numpy(self) -> ndarray:
        """Read-only view of the underlying buffer."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    def copy(self) -> Channel[T]:
        clone = Channel.__new__(Channel)
        # deepcopy so object slots are not shared with the clone
        clone._data = copy.deepcopy(self._data) if self._data.dtype == object else self._data.copy()
        clone._default = copy.deepcopy(self._default)
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Channel):
            return NotImplemented
        return (
            len(self) == len(other)
            and self._default == other._default
            and all(a == b for a, b in zip(self, other))
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Channel(default={self._default!r}, length={len(self)}, dtype={self.dtype})"
