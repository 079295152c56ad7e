"""Reordering of axes."""

from __future__ import annotations

from collections.abc import Sequence


class TransposeMixin:
    """Adds axis permutation to a layout class."""

    __slots__ = ()

    def transpose(self, perm: Sequence[int]):
        """Move axis ``perm[k]`` to the k-th smallest position named in ``perm``.

        Axes not named in ``perm`` stay where they are.
        """
        perm = tuple(perm)
        targets = sorted(set(perm))
        if len(targets) != len(perm):
            raise ValueError(f"permutation has repeated axes: {list(perm)}")
        if any(not 0 <= p < self.ndim for p in perm):
            raise IndexError(f"permutation {list(perm)} out of range for {self.ndim} dimensions")
        shape = list(self.shape)
        strides = list(self.strides)
        for i, j in zip(targets, perm):
            shape[i] = self.shape[j]
            strides[i] = self.strides[j]
        return type(self)(shape, strides, self.offset)