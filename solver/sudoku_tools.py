# sudoku_tools.py
"""Depth-first solving over an explicit frontier of grid copies, plus a sanity checker and a tool-friendly wrapper used by the CLI."""

from __future__ import annotations

import time
from typing import Dict, List, Optional

from types_sudoku import SolveReport

from .solver_core import (
    SIZE, Grid, rc_to_key, unit_cells_box, unit_cells_col, unit_cells_row,
)


class UnsolvableError(RuntimeError):
    """The frontier ran out before a complete grid was found."""

    def __init__(self, grid: Grid, iterations: int) -> None:
        self.grid = grid
        self.iterations = iterations
        super().__init__(
            f"No solution found after {iterations} iterations; last grid examined:\n{grid.render()}"
        )


def solve(grid: Grid, stats: Optional[Dict[str, int]] = None) -> Grid:
    """Drive `grid` to a complete grid. The input grid is left untouched.

    The frontier is a LIFO stack seeded with a copy of the input. Each step pops
    a grid, returns it if complete, otherwise expands its first unfilled cell
    (row-major): no candidates drops the branch, one candidate pushes the forced
    copy, several push one copy per candidate in ascending order, so the largest
    candidate is tried first.

    If `stats` is given it receives `iterations` and `max_frontier`.
    """
    frontier: List[Grid] = [grid.copy()]
    last = grid
    iterations = 0
    max_frontier = 1

    def record() -> None:
        if stats is not None:
            stats["iterations"] = iterations
            stats["max_frontier"] = max_frontier

    while frontier:
        current = frontier.pop()
        last = current
        if current.is_complete():
            record()
            return current

        iterations += 1
        r, c = current.first_empty()
        options = current.candidates(r, c)
        # empty options drop the branch; ascending push puts the largest digit on top
        for digit in options:
            frontier.append(current.with_value(r, c, digit))
        max_frontier = max(max_frontier, len(frontier))

    record()
    raise UnsolvableError(last, iterations)


def sanity_check(original: Grid, current: Grid) -> Dict:
    """Report givens that changed and digits repeated inside a row, column or box."""
    issues = []
    for r, c, given in original.iter_cells():
        found = current[r, c]
        if given is not None and found != given:
            issues.append({"type": "given_overwritten", "cell": rc_to_key(r, c),
                           "given": int(given), "found": None if found is None else int(found)})

    def check_unit(label: str, cells):
        seen = set(); dups = set()
        for r, c in cells:
            v = current[r, c]
            if v is None: continue
            if v in seen: dups.add(v)
            seen.add(v)
        if dups:
            issues.append({"type": "duplicate", "unit": label,
                           "digits": sorted(int(d) for d in dups),
                           "cells": [rc_to_key(r, c) for r, c in cells if current[r, c] in dups]})

    for i in range(SIZE):
        check_unit(f"r{i + 1}", unit_cells_row(i))
    for i in range(SIZE):
        check_unit(f"c{i + 1}", unit_cells_col(i))
    for b in range(1, SIZE + 1):
        check_unit(f"b{b}", unit_cells_box(b))
    return {"ok": len(issues) == 0, "issues": issues}


def solve_tool(grid: Grid, verify: bool = True, placeholder: str = "_") -> SolveReport:
    """Solve and summarize as a plain dict. Exhaustion is reported, not raised.

    With `verify`, givens that already clash are rejected up front and the
    solved grid is re-checked before it is returned.
    """
    if verify:
        check = sanity_check(grid, grid)
        if not check["ok"]:
            return {
                "solved": False,
                "grid": grid.render(placeholder),
                "iterations": 0,
                "max_frontier": 0,
                "elapsed_s": 0.0,
                "error": "conflicting givens: " + ", ".join(
                    f"{i['unit']} repeats {i['digits']}" for i in check["issues"]),
            }

    stats: Dict[str, int] = {}
    t0 = time.perf_counter()
    try:
        solved = solve(grid, stats)
    except UnsolvableError as e:
        return {
            "solved": False,
            "grid": e.grid.render(placeholder),
            "iterations": e.iterations,
            "max_frontier": stats.get("max_frontier", 0),
            "elapsed_s": time.perf_counter() - t0,
            "error": "unsolvable",
        }
    elapsed = time.perf_counter() - t0

    if verify:
        check = sanity_check(grid, solved)
        if not check["ok"]:
            raise RuntimeError(f"Solver produced an invalid grid: {check['issues']}")

    return {
        "solved": True,
        "grid": solved.render(placeholder),
        "iterations": stats["iterations"],
        "max_frontier": stats["max_frontier"],
        "elapsed_s": elapsed,
    }
