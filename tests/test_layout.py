import pytest

from ndlayout.core import Endian
from ndlayout.layout import ArrayLayout


def test_new_doc_example():
    layout = ArrayLayout([2, 3, 4], [12, -4, 1], 20)
    assert layout.offset == 20
    assert layout.shape == (2, 3, 4)
    assert layout.strides == (12, -4, 1)
    assert layout.ndim == 3


def test_new_contiguous_doc_example():
    layout = ArrayLayout.new_contiguous([2, 3, 4], Endian.LITTLE_ENDIAN, 4)
    assert layout.offset == 0
    assert layout.shape == (2, 3, 4)
    assert layout.strides == (4, 8, 24)


def test_num_elements_doc_example():
    layout = ArrayLayout.new_contiguous([2, 3, 4], Endian.BIG_ENDIAN, 20)
    assert layout.num_elements() == 24


def test_element_offset_doc_example():
    layout = ArrayLayout.new_contiguous([2, 3, 4], Endian.BIG_ENDIAN, 4)
    assert layout.element_offset(22, Endian.BIG_ENDIAN) == 88


def test_new_contiguous_returns_array_layout():
    layout = ArrayLayout.new_contiguous([3, 4], Endian.BIG_ENDIAN, 1)
    assert type(layout) is ArrayLayout
    assert layout.strides == (4, 1)
    transposed = layout.transpose([1, 0])
    assert type(transposed) is ArrayLayout
    assert transposed.shape == (4, 3)
    assert transposed.strides == (1, 4)


def test_mismatched_lengths_raise():
    with pytest.raises(ValueError):
        ArrayLayout([2, 3], [1], 0)


def test_equality_and_hash():
    a = ArrayLayout([2, 3], [3, 1], 0)
    b = ArrayLayout.new_contiguous([2, 3], Endian.BIG_ENDIAN, 1)
    assert a == b
    assert hash(a) == hash(b)
    assert a != ArrayLayout([2, 3], [3, 1], 1)


def test_data_range_matches_last_element_for_contiguous():
    layout = ArrayLayout.new_contiguous([2, 3, 4], Endian.BIG_ENDIAN, 4)
    start, end = layout.data_range()
    assert start == layout.offset
    assert end == layout.element_offset(layout.num_elements() - 1, Endian.BIG_ENDIAN)


def test_data_range_with_negative_stride_covers_all_elements():
    layout = ArrayLayout([2, 3, 4], [12, 4, 1], 0).slice(1, 2, -1, 2)
    start, end = layout.data_range()
    offsets = [layout.element_offset(i, Endian.BIG_ENDIAN) for i in range(layout.num_elements())]
    assert start == min(offsets)
    assert end == max(offsets)


def test_split_parts_match_slices():
    layout = ArrayLayout([2, 3, 4], [12, 4, 1], 0)
    first, second = layout.split(2, [1, 3])
    assert first == layout.slice(2, 0, 1, 1)
    assert second == layout.slice(2, 1, 1, 3)
    assert second.offset == 1


def test_transpose_then_merge_free_restores_single_axis():
    layout = ArrayLayout.new_contiguous([2, 3, 4], Endian.BIG_ENDIAN, 1)
    merged = layout.transpose([1, 0]).merge_free(0, 3)
    assert merged == layout.merge_be(0, 3)


def test_index_after_tile_matches_element_offset():
    layout = ArrayLayout.new_contiguous([6], Endian.BIG_ENDIAN, 2).tile_be(0, [2, 3])
    for i in range(2):
        row = layout.index(0, i)
        for j in range(3):
            assert row.index(0, j).offset == layout.element_offset(i * 3 + j, Endian.BIG_ENDIAN)


def test_broadcast_then_format():
    layout = ArrayLayout([1, 2], [2, 1], 0).broadcast(0, 2)
    assert layout.format_array(["a", "b"]) == "array<2x2>[..]\na b \na b \n"