from __future__ import annotations

from sudoku_backtrack.board import EMPTY, copy_grid, find_empty
from sudoku_backtrack.checker import find_conflict, is_valid
from sudoku_backtrack.models import Grid, SolutionResult


def _search(grid: Grid) -> bool:
    cell = find_empty(grid)
    if cell is None:
        return True

    r, c = cell
    for d in range(1, 10):
        # cell is still EMPTY here, so is_valid only sees its peers
        if is_valid(grid, r, c, d):
            grid[r][c] = d
            if _search(grid):
                return True
            grid[r][c] = EMPTY

    return False


# ------------------ public API ------------------
def solve(grid: Grid) -> bool:
    """
    Fill every empty cell in place by depth-first backtracking.

    Cells are visited in row-major order and digits tried 1..9, so the
    result is the smallest completion in that order. Returns False and
    leaves the grid untouched when no completion exists, including when
    the clues already repeat a digit in some row, column or box.

    A grid with no empty cell is reported solved without being checked.
    """
    if find_empty(grid) is None:
        return True
    if not find_conflict(grid).is_valid:
        return False
    return _search(grid)


def solve_copy(grid: Grid) -> SolutionResult:
    work = copy_grid(grid)
    if not solve(work):
        return SolutionResult(False, None)
    return SolutionResult(True, work)
