"""Core description of a strided multi-dimensional array layout."""

from __future__ import annotations

import enum
import operator
from collections.abc import Iterable
from math import prod


class Endian(enum.Enum):
    """Order in which dimensions are stored in layout metadata."""

    BIG_ENDIAN = "big"
    """Dimensions with a larger span come first."""
    LITTLE_ENDIAN = "little"
    """Dimensions with a smaller span come first."""


class LayoutBase:
    """Immutable shape, strides (in bytes) and byte offset of an array."""

    __slots__ = ("_shape", "_strides", "_offset")

    def __init__(self, shape: Iterable[int], strides: Iterable[int], offset: int) -> None:
        shape_t = tuple(operator.index(d) for d in shape)
        strides_t = tuple(operator.index(s) for s in strides)
        if len(shape_t) != len(strides_t):
            raise ValueError("shape and strides must have the same length")
        if any(d < 0 for d in shape_t):
            raise ValueError(f"shape must not contain negative sizes: {shape_t}")
        self._shape = shape_t
        self._strides = strides_t
        self._offset = operator.index(offset)

    @classmethod
    def new_contiguous(cls, shape: Iterable[int], endian: Endian, element_size: int):
        """Create a densely packed layout whose strides follow ``endian``."""
        shape_t = tuple(shape)
        strides = [0] * len(shape_t)
        order = range(len(shape_t))
        if endian is Endian.BIG_ENDIAN:
            order = reversed(order)
        mul = element_size
        for i in order:
            strides[i] = mul
            mul *= shape_t[i]
        return cls(shape_t, strides, 0)

    @property
    def ndim(self) -> int:
        """Number of dimensions."""
        return len(self._shape)

    @property
    def offset(self) -> int:
        """Byte offset of the first element."""
        return self._offset

    @property
    def shape(self) -> tuple[int, ...]:
        """Size of every dimension."""
        return self._shape

    @property
    def strides(self) -> tuple[int, ...]:
        """Byte stride of every dimension."""
        return self._strides

    def num_elements(self) -> int:
        """Number of elements the layout addresses."""
        return prod(self._shape)

    def element_offset(self, index: int, endian: Endian) -> int:
        """Byte offset of the element at flat ``index`` counted in ``endian`` order."""
        if index < 0:
            raise ValueError(f"index must not be negative: {index}")
        pairs = list(zip(self._shape, self._strides))
        if endian is Endian.BIG_ENDIAN:
            pairs.reverse()
        total = 0
        rem = index
        for d, s in pairs:
            total += s * (rem % d)
            rem //= d
        return self._offset + total

    def data_range(self) -> tuple[int, int]:
        """Inclusive ``(start, end)`` byte range touched by the element starts."""
        start = end = self._offset
        for d, s in zip(self._shape, self._strides):
            span = s * (d - 1)
            if s < 0:
                start += span
            elif s > 0:
                end += span
        return start, end

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LayoutBase):
            return NotImplemented
        return (self._offset, self._shape, self._strides) == (
            other._offset,
            other._shape,
            other._strides,
        )

    def __hash__(self) -> int:
        return hash((self._offset, self._shape, self._strides))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(shape={list(self._shape)}, "
            f"strides={list(self._strides)}, offset={self._offset})"
        )