import copy
from typing import Any, Optional
import numpy as np
from numpy import ndarray
from ..types.color_types import is_numeric_scalar


def infer_dtype(fill_value: Any) -> np.dtype:
    """Pick a buffer dtype for ``fill_value``; non-numeric values get ``object``."""
    if is_numeric_scalar(fill_value):
        return np.asarray(fill_value).dtype
    return np.dtype(object)


def filled_buffer(fill_value: Any, size: int, dtype: Optional[np.dtype] = None) -> ndarray:
    """
    Build a 1-D buffer holding ``size`` copies of ``fill_value``.

    Object buffers get an independent deep copy per slot, so a mutable fill
    value is never shared between slots or with the caller.
    """
    if size < 0:
        raise ValueError(f"buffer size must be non-negative, got {size}")
    if dtype is None:
        dtype = infer_dtype(fill_value)
    buffer = np.empty(size, dtype=dtype)
    if buffer.dtype == object:
        for i in range(size):
            buffer[i] = copy.deepcopy(fill_value)
    else:
        buffer.fill(fill_value)
    return buffer


def handle_buffer_size_mismatch(buffer: ndarray, target_size: int, fill_value: Any) -> ndarray:
    """Adjusts the size of a 1-D buffer to match target_size.

    Growing extends the buffer with copies of fill_value; shrinking truncates it.
    Args:
        buffer (ndarray): The input buffer. It is never modified.
        target_size (int): The desired size of the buffer.
        fill_value (Any): Value used for every slot added when growing.
    Returns:
        ndarray: A buffer of exactly target_size elements, same dtype. The
            input itself is returned when no change is needed.
    """
    if target_size < 0:
        raise ValueError(f"target size must be non-negative, got {target_size}")
    current_size = buffer.shape[0]
    if current_size < target_size:
        tail = filled_buffer(fill_value, target_size - current_size, buffer.dtype)
        return np.concatenate([buffer, tail])
    if current_size > target_size:
        # copy so the old allocation is released
        return buffer[:target_size].copy()
    return buffer
