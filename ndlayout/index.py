"""Selecting single positions along axes."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class IndexArg:
    """Select element ``index`` along ``axis``."""

    axis: int
    index: int


class IndexMixin:
    """Adds indexing, which removes the indexed axes, to a layout class."""

    __slots__ = ()

    def _check_index_arg(self, arg: IndexArg) -> None:
        if not (0 <= arg.axis < self.ndim and 0 <= arg.index < self.shape[arg.axis]):
            raise ValueError(f"Invalid index arg: {arg!r}")

    def index(self, axis: int, index: int):
        """Pick position ``index`` on ``axis``, dropping that axis."""
        return self.index_many([IndexArg(axis, index)])

    def index_many(self, args: Iterable[IndexArg]):
        """Index several axes at once; axes must be strictly ascending."""
        pending = deque(args)
        if not pending:
            return self
        self._check_index_arg(pending[0])

        offset = self.offset
        shape: list[int] = []
        strides: list[int] = []
        for axis, (d, s) in enumerate(zip(self.shape, self.strides)):
            if pending and pending[0].axis == axis:
                arg = pending.popleft()
                offset += arg.index * s
                if pending:
                    self._check_index_arg(pending[0])
                    if pending[0].axis <= arg.axis:
                        raise ValueError("Index args must be in ascending order")
            else:
                shape.append(d)
                strides.append(s)
        return type(self)(shape, strides, offset)