"""Broadcasting of size-one dimensions."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class BroadcastArg:
    """Broadcast ``axis`` to ``times`` copies."""

    axis: int
    times: int


class BroadcastMixin:
    """Adds broadcasting to a layout class."""

    __slots__ = ()

    def broadcast(self, axis: int, times: int):
        """Repeat a size-one axis ``times`` times with a zero stride."""
        return self.broadcast_many([BroadcastArg(axis, times)])

    def broadcast_many(self, args: Iterable[BroadcastArg]):
        """Broadcast several axes at once."""
        shape = list(self.shape)
        strides = list(self.strides)
        for arg in args:
            if not 0 <= arg.axis < len(shape):
                raise IndexError(f"axis {arg.axis} out of range for {len(shape)} dimensions")
            if shape[arg.axis] != 1 and strides[arg.axis] != 0:
                raise ValueError(
                    f"axis {arg.axis} has size {shape[arg.axis]} and non-zero stride"
                )
            shape[arg.axis] = arg.times
            strides[arg.axis] = 0
        return type(self)(shape, strides, self.offset)