from .list_mismatch import (
    filled_buffer,
    handle_buffer_size_mismatch,
    infer_dtype,
)
