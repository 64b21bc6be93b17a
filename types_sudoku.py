# types_sudoku.py
from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import Optional, TypedDict

MIN_DIGIT = 1
MAX_DIGIT = 9


@total_ordering
@dataclass(frozen=True)
class Digit:
    """A Sudoku digit, always in 1..9. Build it with `new` or `parse`."""

    value: int

    def __post_init__(self) -> None:
        if not (MIN_DIGIT <= self.value <= MAX_DIGIT):
            raise ValueError(f"Digit out of range: {self.value!r}")

    @classmethod
    def new(cls, value: int) -> Digit | None:
        """Return a Digit, or None when `value` is 0 or greater than 9."""
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        if not (MIN_DIGIT <= value <= MAX_DIGIT):
            return None
        return cls(value)

    @classmethod
    def parse(cls, text: str) -> Digit | None:
        """Parse a decimal token. Non-numeric or out-of-range text gives None."""
        token = text.strip()
        if not token.isascii() or not token.isdigit():
            return None
        return cls.new(int(token))

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def __lt__(self, other: Digit) -> bool:
        if not isinstance(other, Digit):
            return NotImplemented
        return self.value < other.value


ALL_DIGITS: tuple[Digit, ...] = tuple(Digit(d) for d in range(MIN_DIGIT, MAX_DIGIT + 1))

Cell = Optional[Digit]
"""A grid cell: a Digit, or None when unfilled."""

Rows = list[list[Cell]]
"""A 9x9 Sudoku grid as rows of cells."""


class SolveReport(TypedDict, total=False):
    """Result of one solve, as returned by the tool layer and printed by the CLI."""

    solved: bool
    grid: str  # rendered grid (solved grid, or the grid at time of failure)
    iterations: int  # number of incomplete grids expanded
    max_frontier: int  # peak frontier size
    elapsed_s: float
    error: str  # set when solved is False
