from .format_type import FormatType, format_bounds, format_classes, default_format_dtypes
from .color_types import Scalar, ScalarVector, RGBATuple

__all__ = [
    "FormatType",
    "format_bounds",
    "format_classes",
    "default_format_dtypes",
    "Scalar",
    "ScalarVector",
    "RGBATuple",
]
