# tests/test_solver_core.py
import pytest

from solver.grid_io import parse_grid
from solver.solver_core import Grid, box_bounds
from types_sudoku import Digit


def D(*vals):
    return [Digit(v) for v in vals]


def test_box_bounds_bands():
    assert [box_bounds(i) for i in range(9)] == [(0, 3)] * 3 + [(3, 6)] * 3 + [(6, 9)] * 3


def test_grid_from_ints_and_shape():
    g = Grid([[0] * 9 for _ in range(9)])
    assert g == Grid()
    with pytest.raises(ValueError):
        Grid([[0] * 9 for _ in range(8)])
    with pytest.raises(ValueError):
        Grid([[10] + [0] * 8] + [[0] * 9 for _ in range(8)])


def test_grid_does_not_share_storage():
    rows = [[0] * 9 for _ in range(9)]
    g = Grid(rows)
    rows[0][0] = 5
    assert g[0, 0] is None
    g2 = g.copy()
    g2.set(0, 0, Digit(5))
    assert g[0, 0] is None and g2[0, 0] == Digit(5)


def test_set_never_overwrites(puzzle_text):
    g = parse_grid(puzzle_text.splitlines())
    with pytest.raises(ValueError):
        g.set(0, 1, Digit(6))
    with pytest.raises(ValueError):
        g.with_value(0, 1, Digit(3))


def test_neighborhood(puzzle_text):
    g = parse_grid(puzzle_text.splitlines())
    assert g.row_values(0) == set(D(6, 2, 9, 8, 1, 4))
    assert g.col_values(0) == set(D(5, 4, 3, 6))
    assert g.box_values(0, 0) == set(D(6, 2, 5, 8))
    assert g.neighborhood(0, 0) == set(D(1, 2, 3, 4, 5, 6, 8, 9))


def test_candidates_forced_and_sorted(puzzle_text):
    g = parse_grid(puzzle_text.splitlines())
    assert g.candidates(0, 0) == D(7)
    # r5c1: row is empty, column has 5 4 3 6, box has 4 1 7
    assert g.candidates(4, 0) == D(2, 8, 9)
    assert g.candidates(0, 1) == []


def test_candidate_soundness(puzzle_text):
    g = parse_grid(puzzle_text.splitlines())
    for r, c, cell in g.iter_cells():
        if cell is not None:
            continue
        cands = set(g.candidates(r, c))
        assert not cands & g.row_values(r)
        assert not cands & g.col_values(c)
        assert not cands & g.box_values(r, c)
        assert cands | g.neighborhood(r, c) == set(D(*range(1, 10)))


def test_dead_end_cell_has_no_candidates(dead_end_rows):
    g = Grid(dead_end_rows)
    assert g.candidates(0, 0) == []


def test_first_empty_row_major(puzzle_text):
    g = parse_grid(puzzle_text.splitlines())
    assert g.first_empty() == (0, 0)
    g.set(0, 0, Digit(7))
    assert g.first_empty() == (0, 3)


def test_is_complete(puzzle_text, solution_text):
    assert not parse_grid(puzzle_text.splitlines()).is_complete()
    assert parse_grid(solution_text.splitlines()).is_complete()
    assert Grid().first_empty() == (0, 0)


def test_render(puzzle_text):
    g = parse_grid(puzzle_text.splitlines())
    assert g.render() == puzzle_text
    assert g.render(".").splitlines()[0] == ". 6 2 . 9 8 1 . 4"
    assert g.filled_count() == 36
