"""S-expression container.

An SExpr exclusively owns its cells. ``pop`` moves a cell out to the caller,
``take`` moves one cell out and disposes of everything left behind.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator

from simplysp.types.value import Value, dispose


class SExpr:
    __slots__ = ("cells",)

    def __init__(self, cells: list[Value] | None = None):
        self.cells: list[Value] = []
        for cell in cells or ():
            self.add(cell)

    # ----------------- Ownership transfer -----------------
    def add(self, v: Value) -> SExpr:
        """Append ``v`` as the last cell. Returns self so calls can be chained."""
        self.cells.append(v)
        return self

    def pop(self, i: int) -> Value:
        """Remove and return the cell at ``i``; later cells shift left by one."""
        if not 0 <= i < len(self.cells):
            raise IndexError(f"pop index {i} out of range for S-expression of {len(self.cells)} cells")
        return self.cells.pop(i)

    def take(self, i: int) -> Value:
        """Pop the cell at ``i`` and dispose of the rest of this list."""
        x = self.pop(i)
        self.dispose()
        return x

    def dispose(self) -> None:
        cells, self.cells = self.cells, []
        for cell in cells:
            dispose(cell)

    # ----------------- Sequence protocol -----------------
    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.cells)

    def __getitem__(self, i: int) -> Value:
        return self.cells[i]

    def __eq__(self, other) -> bool:
        return isinstance(other, SExpr) and self.cells == other.cells

    __hash__ = None

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("SExpr([")
            buffer.write(", ".join(repr(c) for c in self.cells))
            buffer.write("])")
            return buffer.getvalue()

    def __str__(self) -> str:
        from simplysp.printer import to_str
        return to_str(self)
