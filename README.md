# ndlayout

`ndlayout` describes how the elements of a multi-dimensional array are laid
out in memory, as a shape, a tuple of strides and a starting offset, and
transforms those descriptions without touching any data.

Every transformation returns a new layout; the original is left unchanged.
Layouts are immutable, compare equal when shape, strides and offset match, and
can be hashed.

## Installation

```
pip install ndlayout
```

To run the test suite:

```
pip install "ndlayout[test]"
pytest
```

## Creating layouts

```python
from ndlayout.core import Endian
from ndlayout.layout import ArrayLayout

layout = ArrayLayout([2, 3, 4], [12, -4, 1], 20)
layout.shape     # (2, 3, 4)
layout.strides   # (12, -4, 1)
layout.offset    # 20

contiguous = ArrayLayout.new_contiguous([2, 3, 4], Endian.LITTLE_ENDIAN, 4)
contiguous.strides  # (4, 8, 24)
```

`Endian.BIG_ENDIAN` gives the first dimension the widest span;
`Endian.LITTLE_ENDIAN` gives it the narrowest. A shape and strides of different
lengths, or a negative size, raise `ValueError`.

Queries:

- `ndim` and `num_elements()`
- `element_offset(index, endian)`: offset of the element at a flat index,
  counting the index in the given order
- `data_range()`: the inclusive `(start, end)` offsets of the elements the
  layout addresses

```python
layout = ArrayLayout.new_contiguous([2, 3, 4], Endian.BIG_ENDIAN, 4)
layout.num_elements()                      # 24
layout.element_offset(22, Endian.BIG_ENDIAN)  # 88

ArrayLayout([2, 3, 4], [12, -4, 1], 20).data_range()  # (12, 35)
```

## Transformations

| Method | What it does |
| --- | --- |
| `index(axis, index)` / `index_many(args)` | pick one position along an axis, dropping that axis |
| `slice(axis, start, step, length)` / `slice_many(args)` | take a strided run along an axis; negative steps go backwards |
| `split(axis, parts)` | cut one axis into pieces of the given sizes, yielding a layout per piece |
| `transpose(perm)` | reorder the listed axes among the positions they occupy |
| `broadcast(axis, times)` / `broadcast_many(args)` | repeat an axis of size 1 (or stride 0) with stride 0 |
| `tile_be(axis, tiles)` / `tile_le(axis, tiles)` / `tile_many(args)` | split one axis into several |
| `merge_be(start, length)` / `merge_le(...)` / `merge_free(...)` / `merge_many(args)` | fuse consecutive axes into one; returns `None` if they are not contiguous |

```python
from ndlayout.layout import ArrayLayout

layout = ArrayLayout([2, 3, 4], [12, 4, 1], 0)

layout.index(1, 2).shape                    # (2, 4)
layout.index(1, 2).offset                   # 8
layout.slice(1, 2, -1, 2).strides           # (12, -4, 1)
layout.transpose([1, 0]).shape              # (3, 2, 4)
[p.shape for p in layout.split(2, [1, 3])]  # [(2, 3, 1), (2, 3, 3)]
layout.merge_be(0, 3).shape                 # (24,)

ArrayLayout([2, 3, 6], [18, 6, 1], 0).tile_be(2, [2, 3]).strides  # (18, 6, 3, 1)
ArrayLayout([1, 5, 2], [10, 2, 1], 0).broadcast(0, 10).strides    # (0, 2, 1)
```

`merge_be` expects earlier axes to span more memory, `merge_le` expects the
reverse, and `merge_free` accepts any order. Axes of size 1 are ignored when
merging; merging axes of size 0 raises `ValueError`.

To apply several transformations of one kind in a single call, pass argument
records to the matching `*_many` method, in ascending axis order:

- `ndlayout.index.IndexArg(axis, index)`
- `ndlayout.slicing.SliceArg(axis, start, step, length)`
- `ndlayout.broadcast.BroadcastArg(axis, times)`
- `ndlayout.tile.TileArg(axis, endian, tiles)`
- `ndlayout.merge.MergeArg(start, length, endian=None)`

Invalid arguments, such as an out-of-range index, axes out of order, or tiles
whose product does not match the axis size, raise `ValueError` or `IndexError`
rather than returning a bad layout.

## Printing array contents

`format_array(data)` renders the elements a layout selects from a sequence
(a `bytes` object, a list, ...). Offset and strides are read as positions in
that sequence. Arrays with more than two dimensions are printed as a run of
2-D slices, each headed by its leading indices.

```python
from ndlayout.core import Endian
from ndlayout.layout import ArrayLayout

data = bytes([1, 2, 3, 4, 5, 6])
print(ArrayLayout.new_contiguous([2, 3], Endian.BIG_ENDIAN, 1).format_array(data))
# array<2x3>[..]
# 1 2 3
# 4 5 6
```

A position outside `data` raises `IndexError`.