import pytest
from hypothesis import given
from hypothesis import strategies as st

from ndlayout.core import Endian, LayoutBase


def test_new_keeps_fields():
    layout = LayoutBase([2, 3, 4], [12, -4, 1], 20)
    assert layout.offset == 20
    assert layout.shape == (2, 3, 4)
    assert layout.strides == (12, -4, 1)
    assert layout.ndim == 3


def test_new_rejects_length_mismatch():
    with pytest.raises(ValueError):
        LayoutBase([2, 3], [1], 0)


def test_new_rejects_negative_size():
    with pytest.raises(ValueError):
        LayoutBase([2, -1], [1, 1], 0)


def test_new_contiguous_little_endian():
    layout = LayoutBase.new_contiguous([2, 3, 4], Endian.LITTLE_ENDIAN, 4)
    assert layout.offset == 0
    assert layout.shape == (2, 3, 4)
    assert layout.strides == (4, 8, 24)


def test_num_elements():
    layout = LayoutBase.new_contiguous([2, 3, 4], Endian.BIG_ENDIAN, 20)
    assert layout.num_elements() == 24


def test_element_offset_documented_example():
    layout = LayoutBase.new_contiguous([2, 3, 4], Endian.BIG_ENDIAN, 4)
    assert layout.element_offset(22, Endian.BIG_ENDIAN) == 88


def test_element_offset_negative_index():
    layout = LayoutBase.new_contiguous([2, 3], Endian.BIG_ENDIAN, 1)
    with pytest.raises(ValueError):
        layout.element_offset(-1, Endian.BIG_ENDIAN)


def test_zero_dim_layout():
    layout = LayoutBase([], [], 7)
    assert layout.ndim == 0
    assert layout.num_elements() == 1
    assert layout.element_offset(0, Endian.LITTLE_ENDIAN) == 7
    assert layout.data_range() == (7, 7)


def test_equality_and_hash():
    a = LayoutBase([2, 3], [3, 1], 5)
    b = LayoutBase((2, 3), (3, 1), 5)
    c = LayoutBase([2, 3], [3, 1], 6)
    assert a == b
    assert hash(a) == hash(b)
    assert a != c
    assert len({a, b, c}) == 2


def test_repr_mentions_fields():
    text = repr(LayoutBase([2, 3], [3, 1], 5))
    assert text.startswith("LayoutBase(")
    assert "shape=[2, 3]" in text
    assert "offset=5" in text


def test_data_range_negative_stride_reaches_below_offset():
    layout = LayoutBase([2, 3, 4], [12, -4, 1], 20)
    start, end = layout.data_range()
    offsets = [layout.element_offset(i, Endian.BIG_ENDIAN) for i in range(layout.num_elements())]
    assert start == min(offsets)
    assert end == max(offsets)


_shapes = st.lists(st.integers(min_value=1, max_value=4), max_size=4)
_endians = st.sampled_from(list(Endian))


@given(_shapes, _endians, st.integers(min_value=1, max_value=8))
def test_contiguous_offsets_are_dense(shape, endian, element_size):
    layout = LayoutBase.new_contiguous(shape, endian, element_size)
    offsets = [layout.element_offset(i, endian) for i in range(layout.num_elements())]
    assert offsets == [i * element_size for i in range(layout.num_elements())]


@given(_shapes, _endians, st.integers(min_value=1, max_value=8))
def test_contiguous_data_range_covers_all(shape, endian, element_size):
    layout = LayoutBase.new_contiguous(shape, endian, element_size)
    start, end = layout.data_range()
    assert start == 0
    assert end + element_size == layout.num_elements() * element_size