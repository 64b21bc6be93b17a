# solver_core.py
"""Grid model for the solver: index math, row/column/box neighborhoods, candidate digits, and copy-on-write cell placement."""

# Grid is a fixed 9x9 array of cells; a cell is a Digit or None (unfilled).
# Rows and columns are 0-based here; unit labels (r1c1, b1) are 1-based.

from __future__ import annotations

from typing import Iterable, Iterator

from types_sudoku import ALL_DIGITS, Cell, Digit, Rows

SIZE = 9
BAND = 3


def in_bounds(r: int, c: int) -> bool:
    return 0 <= r < SIZE and 0 <= c < SIZE


def rc_to_key(r: int, c: int) -> str:
    """1-based cell label, e.g. rc_to_key(0, 1) == 'r1c2'."""
    return f"r{r + 1}c{c + 1}"


def box_bounds(index: int) -> tuple[int, int]:
    """Half-open band containing `index`: 0-2 -> (0, 3), 3-5 -> (3, 6), 6-8 -> (6, 9)."""
    start = BAND * (index // BAND)
    return start, start + BAND


def unit_cells_row(r: int) -> list[tuple[int, int]]:
    return [(r, c) for c in range(SIZE)]


def unit_cells_col(c: int) -> list[tuple[int, int]]:
    return [(r, c) for r in range(SIZE)]


def unit_cells_box(b: int) -> list[tuple[int, int]]:
    r0 = BAND * ((b - 1) // BAND)
    c0 = BAND * ((b - 1) % BAND)
    return [(r0 + i, c0 + j) for i in range(BAND) for j in range(BAND)]


def _to_cell(value) -> Cell:
    if value is None or isinstance(value, Digit):
        return value
    if value == 0:
        return None
    d = Digit.new(value)
    if d is None:
        raise ValueError(f"Cell value must be 0..9, a Digit or None; got {value!r}")
    return d


class Grid:
    """A 9x9 Sudoku grid. Each instance owns its cells; copies never share storage."""

    __slots__ = ("_cells",)

    def __init__(self, rows: Iterable[Iterable] | None = None) -> None:
        if rows is None:
            self._cells: Rows = [[None] * SIZE for _ in range(SIZE)]
            return
        cells = [[_to_cell(v) for v in row] for row in rows]
        if len(cells) != SIZE or any(len(row) != SIZE for row in cells):
            raise ValueError(f"Grid must be {SIZE}x{SIZE}")
        self._cells = cells

    # ---- access ----

    def __getitem__(self, rc: tuple[int, int]) -> Cell:
        r, c = rc
        if not in_bounds(r, c):
            raise IndexError(f"Cell ({r}, {c}) is outside the grid")
        return self._cells[r][c]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Grid({self.render()!r})"

    def __str__(self) -> str:
        return self.render()

    def rows(self) -> Rows:
        return [row[:] for row in self._cells]

    def iter_cells(self) -> Iterator[tuple[int, int, Cell]]:
        for r, row in enumerate(self._cells):
            for c, cell in enumerate(row):
                yield r, c, cell

    def copy(self) -> Grid:
        g2 = Grid.__new__(Grid)
        g2._cells = [row[:] for row in self._cells]
        return g2

    # ---- mutation ----

    def set(self, r: int, c: int, digit: Digit) -> None:
        """Fill an unfilled cell. Filled cells are never overwritten."""
        if not isinstance(digit, Digit):
            raise TypeError(f"Expected a Digit, got {digit!r}")
        current = self[r, c]
        if current is not None:
            raise ValueError(f"Cell {rc_to_key(r, c)} already holds {current}")
        self._cells[r][c] = digit

    def with_value(self, r: int, c: int, digit: Digit) -> Grid:
        """Return a copy of this grid with one more cell filled."""
        g2 = self.copy()
        g2.set(r, c, digit)
        return g2

    # ---- neighborhoods ----

    def row_values(self, r: int) -> set[Digit]:
        return {d for d in self._cells[r] if d is not None}

    def col_values(self, c: int) -> set[Digit]:
        return {row[c] for row in self._cells if row[c] is not None}

    def box_values(self, r: int, c: int) -> set[Digit]:
        r0, r1 = box_bounds(r)
        c0, c1 = box_bounds(c)
        return {d for row in self._cells[r0:r1] for d in row[c0:c1] if d is not None}

    def neighborhood(self, r: int, c: int) -> set[Digit]:
        """Digits present in the row, column and box of (r, c)."""
        if not in_bounds(r, c):
            raise IndexError(f"Cell ({r}, {c}) is outside the grid")
        return self.row_values(r) | self.col_values(c) | self.box_values(r, c)

    def candidates(self, r: int, c: int) -> list[Digit]:
        """Digits still legal for (r, c), ascending. Empty for a filled cell."""
        if self[r, c] is not None:
            return []
        used = self.neighborhood(r, c)
        return [d for d in ALL_DIGITS if d not in used]

    # ---- state ----

    def first_empty(self) -> tuple[int, int] | None:
        """First unfilled cell in row-major order."""
        for r, c, cell in self.iter_cells():
            if cell is None:
                return r, c
        return None

    def is_complete(self) -> bool:
        return all(cell is not None for row in self._cells for cell in row)

    def filled_count(self) -> int:
        return sum(cell is not None for row in self._cells for cell in row)

    def render(self, placeholder: str = "_") -> str:
        """Each row as space-separated tokens, one row per line."""
        lines = []
        for row in self._cells:
            lines.append(" ".join(placeholder if d is None else str(d) for d in row))
        return "\n".join(lines) + "\n"
