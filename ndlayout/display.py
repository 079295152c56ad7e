"""Rendering the elements a layout addresses as text."""

from __future__ import annotations

from collections.abc import Sequence


def _element(data: Sequence, position: int):
    if not 0 <= position < len(data):
        raise IndexError(f"position {position} outside data of length {len(data)}")
    return data[position]


class DisplayMixin:
    """Adds text rendering of array contents to a layout class.

    Offsets and strides are taken as positions in the ``data`` sequence.
    """

    __slots__ = ()

    def format_array(self, data: Sequence) -> str:
        """Render the elements of ``data`` selected by this layout."""
        if self.ndim == 0:
            return f"array<> = [{_element(data, self.offset)}]"
        if self.ndim == 1:
            (n,) = self.shape
            (s,) = self.strides
            lines = [f"array<{n}>["]
            lines.extend(f"    {_element(data, self.offset + i * s)}" for i in range(n))
            lines.append("]")
            return "\n".join(lines) + "\n"
        title = "array<" + "x".join(str(d) for d in self.shape) + ">"
        out: list[str] = []
        self._write_matrices(data, title, (), out)
        return "".join(out)

    def _write_matrices(self, data: Sequence, title: str, indices: tuple, out: list) -> None:
        if self.ndim > 2:
            for i in range(self.shape[0]):
                self.index(0, i)._write_matrices(data, title, indices + (i,), out)
            return
        out.append(title + "[" + "".join(f"{i}, " for i in indices) + "..]\n")
        rows, cols = self.shape
        rs, cs = self.strides
        for r in range(rows):
            out.append(
                "".join(
                    f"{_element(data, self.offset + r * rs + c * cs)} " for c in range(cols)
                )
                + "\n"
            )