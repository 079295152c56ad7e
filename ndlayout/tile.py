"""Splitting single axes into several tiled axes."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from math import prod

from ndlayout.core import Endian


@dataclass(frozen=True)
class TileArg:
    """Split ``axis`` into axes of sizes ``tiles``, ordered by ``endian``."""

    axis: int
    endian: Endian
    tiles: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "tiles", tuple(self.tiles))


class TileMixin:
    """Adds tiling to a layout class."""

    __slots__ = ()

    def tile_be(self, axis: int, tiles: Sequence[int]):
        """Tile ``axis`` so that the tile with the largest span comes first."""
        return self.tile_many([TileArg(axis, Endian.BIG_ENDIAN, tiles)])

    def tile_le(self, axis: int, tiles: Sequence[int]):
        """Tile ``axis`` so that the tile with the smallest span comes first."""
        return self.tile_many([TileArg(axis, Endian.LITTLE_ENDIAN, tiles)])

    def _check_tile_arg(self, arg: TileArg) -> None:
        if not 0 <= arg.axis < self.ndim:
            raise ValueError(f"axis {arg.axis} out of range for {self.ndim} dimensions")
        if self.shape[arg.axis] != prod(arg.tiles):
            raise ValueError(
                f"tiles {list(arg.tiles)} do not multiply to size "
                f"{self.shape[arg.axis]} of axis {arg.axis}"
            )

    def tile_many(self, args: Iterable[TileArg]):
        """Tile several axes at once; axes must be strictly ascending."""
        args = list(args)
        if not args:
            return self
        last_axis = None
        for arg in args:
            self._check_tile_arg(arg)
            if last_axis is not None and arg.axis <= last_axis:
                raise ValueError("Tile args must be in ascending order")
            last_axis = arg.axis

        by_axis = {arg.axis: arg for arg in args}
        shape: list[int] = []
        strides: list[int] = []
        for axis, (d, s) in enumerate(zip(self.shape, self.strides)):
            arg = by_axis.get(axis)
            if arg is None:
                shape.append(d)
                strides.append(s)
            elif arg.endian is Endian.BIG_ENDIAN:
                stride = s * d
                for t in arg.tiles:
                    if t == 0:
                        raise ValueError("big-endian tiles must not contain zero")
                    stride //= t
                    shape.append(t)
                    strides.append(stride)
            else:
                stride = s
                for t in arg.tiles:
                    shape.append(t)
                    strides.append(stride)
                    stride *= t
        return type(self)(shape, strides, self.offset)