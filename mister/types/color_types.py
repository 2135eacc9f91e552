from __future__ import annotations
from typing import Hashable, Tuple, TypeVar
import numpy as np

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
RGBATuple = Tuple[float, float, float, float]

T = TypeVar("T")
ChannelNameT = TypeVar("ChannelNameT", bound=Hashable)
ValidationErrorT = TypeVar("ValidationErrorT", bound=Exception)


def is_numeric_scalar(value) -> bool:
    """
    Check whether a value can live in a typed (non-object) numpy buffer.

    Args:
        value: Candidate default or sample value

    Returns:
        True for Python/numpy bool, int, float and complex scalars
    """
    return isinstance(value, (bool, int, float, complex, np.generic))
