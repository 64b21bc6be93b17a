# grid_io.py
"""Reading puzzles from text and writing grids back out."""

# Input format: 9 lines of 9 whitespace-separated tokens. A token made of
# decimal digits must be 1..9; anything else (e.g. '_' or '.') is unfilled.

from __future__ import annotations

from typing import Iterable, TextIO

from types_sudoku import Digit

from .solver_core import SIZE, Grid


class GridFormatError(ValueError):
    """Malformed puzzle text. `line_no` is 1-based; `token` is the offending token, if any."""

    def __init__(self, message: str, line_no: int | None = None, token: str | None = None) -> None:
        self.line_no = line_no
        self.token = token
        where = f"line {line_no}: " if line_no is not None else ""
        super().__init__(where + message)


def parse_token(token: str, line_no: int | None = None):
    if token.isascii() and token.isdigit():
        d = Digit.parse(token)
        if d is None:
            raise GridFormatError(f"cell value {token!r} is not in 1..9", line_no, token)
        return d
    return None


def parse_grid(lines: Iterable[str], strict: bool = True) -> Grid:
    """Build a Grid from lines of text.

    strict: exactly 9 rows of exactly 9 tokens; blank lines before or after them are ignored.
    lenient: stop at the first blank line; short rows and missing rows stay unfilled.
    """
    rows = []
    trailing_blank = False
    for line_no, raw in enumerate(lines, start=1):
        tokens = raw.split()
        if not tokens:
            if not strict:
                break
            trailing_blank = bool(rows)
            continue
        if trailing_blank:
            raise GridFormatError("unexpected text after a blank line", line_no)
        if len(rows) == SIZE:
            raise GridFormatError(f"more than {SIZE} rows", line_no)
        if len(tokens) > SIZE or (strict and len(tokens) != SIZE):
            raise GridFormatError(f"expected {SIZE} cells, found {len(tokens)}", line_no)
        row = [parse_token(t, line_no) for t in tokens]
        row += [None] * (SIZE - len(row))
        rows.append(row)

    if strict and len(rows) != SIZE:
        raise GridFormatError(f"expected {SIZE} rows, found {len(rows)}")
    while len(rows) < SIZE:
        rows.append([None] * SIZE)
    return Grid(rows)


def read_grid(stream: TextIO, strict: bool = True) -> Grid:
    try:
        return parse_grid(stream, strict=strict)
    except UnicodeDecodeError as e:
        raise GridFormatError(f"input is not valid text: {e.reason} at byte {e.start}") from e


def format_grid(grid: Grid, placeholder: str = "_") -> str:
    return grid.render(placeholder)
