import numpy as np
import pytest
from mister.utils import filled_buffer, handle_buffer_size_mismatch, infer_dtype


def test_infer_dtype():
    assert infer_dtype(1.0) == np.float64
    assert infer_dtype(np.float32(1.0)) == np.float32
    assert infer_dtype("a") == object
    assert infer_dtype(None) == object


def test_filled_buffer_object_elements():
    buf = filled_buffer((1, 2), 3)
    assert buf.shape == (3,)
    assert all(v == (1, 2) for v in buf)


def test_filled_buffer_negative():
    with pytest.raises(ValueError):
        filled_buffer(0, -1)


def test_extend_uses_fill_value():
    buf = np.array([1, 2], dtype=np.int16)
    out = handle_buffer_size_mismatch(buf, 4, fill_value=7)
    np.testing.assert_array_equal(out, [1, 2, 7, 7])
    assert out.dtype == np.int16
    np.testing.assert_array_equal(buf, [1, 2])


def test_truncate_copies():
    buf = np.arange(5)
    out = handle_buffer_size_mismatch(buf, 2, fill_value=0)
    np.testing.assert_array_equal(out, [0, 1])
    assert not np.shares_memory(out, buf)


def test_same_size_returns_input():
    buf = np.arange(3)
    assert handle_buffer_size_mismatch(buf, 3, fill_value=0) is buf


def test_filled_buffer_object_slots_are_independent():
    fill = {"k": []}
    buf = filled_buffer(fill, 3)
    buf[0]["k"].append(1)
    assert buf[1] == {"k": []}
    assert buf[2] == {"k": []}
    assert fill == {"k": []}


def test_extend_object_buffer_copies_fill_value():
    buf = filled_buffer([], 1)
    out = handle_buffer_size_mismatch(buf, 3, fill_value=[])
    out[1].append(1)
    assert list(out) == [[], [1], []]
