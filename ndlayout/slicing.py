"""Cropping axes to strided ranges."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class SliceArg:
    """Take at most ``length`` items of ``axis`` from ``start`` every ``step``."""

    axis: int
    start: int
    step: int
    length: int


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


class SliceMixin:
    """Adds slicing to a layout class."""

    __slots__ = ()

    def slice(self, axis: int, start: int, step: int, length: int):
        """Slice one axis; a negative ``step`` walks backwards from ``start``."""
        return self.slice_many([SliceArg(axis, start, step, length)])

    def slice_many(self, args: Iterable[SliceArg]):
        """Slice several axes at once; axes must be strictly ascending."""
        pending = deque(args)
        offset = self.offset
        shape = list(self.shape)
        strides = list(self.strides)
        for axis, (d, s) in enumerate(zip(self.shape, self.strides)):
            if not (pending and pending[0].axis == axis):
                continue
            arg = pending.popleft()
            if arg.step >= 0:
                if not arg.start < d:
                    raise ValueError(f"slice start {arg.start} out of range for size {d}")
                offset += arg.start * s
                length = (
                    min(_ceil_div(d - arg.start, arg.step), arg.length)
                    if arg.step > 0
                    else arg.length
                )
            else:
                if d == 0:
                    raise ValueError(f"cannot slice empty axis {axis} backwards")
                start = min(arg.start, d - 1)
                offset += start * s
                length = min(_ceil_div(start + 1, -arg.step), arg.length)
            shape[axis] = length
            strides[axis] = s * arg.step

            if pending and not (arg.axis < pending[0].axis < self.ndim):
                raise ValueError(
                    f"next.axis = {pending[0].axis} !in ({arg.axis}, {self.ndim})"
                )
        return type(self)(shape, strides, offset)