"""The complete array layout type with every transformation."""

from __future__ import annotations

from ndlayout.broadcast import BroadcastMixin
from ndlayout.core import LayoutBase
from ndlayout.display import DisplayMixin
from ndlayout.index import IndexMixin
from ndlayout.merge import MergeMixin
from ndlayout.slicing import SliceMixin
from ndlayout.split import SplitMixin
from ndlayout.tile import TileMixin
from ndlayout.transpose import TransposeMixin


class ArrayLayout(
    BroadcastMixin,
    IndexMixin,
    MergeMixin,
    SliceMixin,
    SplitMixin,
    TileMixin,
    TransposeMixin,
    DisplayMixin,
    LayoutBase,
):
    """Shape, strides and offset of an array, with layout transformations."""

    __slots__ = ()