"""Splitting one axis into consecutive, possibly uneven parts."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import accumulate


class SplitMixin:
    """Adds splitting to a layout class that also supports slicing."""

    __slots__ = ()

    def split(self, axis: int, parts: Sequence[int]) -> Iterator:
        """Yield one layout per part of ``axis``; the parts must sum to its size."""
        parts = tuple(parts)
        if not 0 <= axis < self.ndim:
            raise IndexError(f"axis {axis} out of range for {self.ndim} dimensions")
        if self.shape[axis] != sum(parts):
            raise ValueError(
                f"parts {list(parts)} do not add up to size {self.shape[axis]} of axis {axis}"
            )
        starts = accumulate(parts, initial=0)
        return (self.slice(axis, start, 1, part) for start, part in zip(starts, parts))