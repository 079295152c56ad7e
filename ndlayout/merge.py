"""Merging runs of consecutive axes into single axes."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ndlayout.core import Endian


@dataclass(frozen=True)
class MergeArg:
    """Merge ``length`` axes from ``start``; ``endian`` None ignores axis order."""

    start: int
    length: int
    endian: Endian | None = None


class MergeMixin:
    """Adds merging of contiguous axes to a layout class.

    Merging returns ``None`` when the axes cannot be described by one stride.
    """

    __slots__ = ()

    def merge_be(self, start: int, length: int):
        """Merge axes where earlier axes span more memory."""
        return self.merge_many([MergeArg(start, length, Endian.BIG_ENDIAN)])

    def merge_le(self, start: int, length: int):
        """Merge axes where earlier axes span less memory."""
        return self.merge_many([MergeArg(start, length, Endian.LITTLE_ENDIAN)])

    def merge_free(self, start: int, length: int):
        """Merge axes in whatever order makes their storage contiguous."""
        return self.merge_many([MergeArg(start, length, None)])

    def merge_many(self, args: Iterable[MergeArg]):
        """Merge several runs of axes at once; runs must be ascending and disjoint."""
        shape = self.shape
        strides = self.strides
        out_shape: list[int] = []
        out_strides: list[int] = []
        last_end = 0

        for arg in args:
            if arg.length == 0:
                continue
            start = arg.start
            end = start + arg.length
            if start < last_end or end > self.ndim or arg.length < 0:
                raise ValueError(
                    f"merge range [{start}, {end}) invalid after {last_end} "
                    f"for {self.ndim} dimensions"
                )
            out_shape.extend(shape[last_end:start])
            out_strides.extend(strides[last_end:start])
            last_end = end

            run = list(zip(shape[start:end], strides[start:end]))
            if any(d == 0 for d, _ in run):
                raise ValueError("cannot merge axes of size zero")
            pairs = [(d, s) for d, s in run if d != 1]
            if not pairs:
                out_shape.append(1)
                out_strides.append(0)
                continue

            if arg.endian is Endian.BIG_ENDIAN:
                pairs.reverse()
            elif arg.endian is None:
                pairs.sort(key=lambda pair: abs(pair[1]))

            (d, s), *rest = pairs
            for d_next, s_next in rest:
                if s_next != s * d:
                    return None
                d *= d_next
            out_shape.append(d)
            out_strides.append(s)

        out_shape.extend(shape[last_end:])
        out_strides.extend(strides[last_end:])
        return type(self)(out_shape, out_strides, self.offset)