from __future__ import annotations
from typing import Dict, List

from sudoku_backtrack.board import SIZE, BOX, EMPTY, box_origin, box_cells
from sudoku_backtrack.models import RC, Grid, ConflictType, ValidationResult


# ------------------ unit scans ------------------
def in_row(grid: Grid, r: int, d: int) -> bool:
    return any(grid[r][c] == d for c in range(SIZE))


def in_col(grid: Grid, c: int, d: int) -> bool:
    return any(grid[r][c] == d for r in range(SIZE))


def in_box(grid: Grid, r: int, c: int, d: int) -> bool:
    br, bc = box_origin(r, c)
    for rr in range(br, br + BOX):
        for cc in range(bc, bc + BOX):
            if grid[rr][cc] == d:
                return True
    return False


def is_valid(grid: Grid, r: int, c: int, d: int) -> bool:
    """
    True iff d can go at (r, c) without repeating in its row, column or box.
    The cell (r, c) itself is part of every scan: if it already holds d the
    answer is False.
    """
    return not (in_row(grid, r, d) or in_col(grid, c, d) or in_box(grid, r, c, d))


# ------------------ whole-grid consistency ------------------
def find_conflict(grid: Grid) -> ValidationResult:
    """First duplicated digit among filled cells, checking rows, then columns, then boxes."""
    for r in range(SIZE):
        dup = _find_duplicate(grid, [(r, c) for c in range(SIZE)])
        if dup:
            return ValidationResult(False, ConflictType.ROW, dup)
    for c in range(SIZE):
        dup = _find_duplicate(grid, [(r, c) for r in range(SIZE)])
        if dup:
            return ValidationResult(False, ConflictType.COL, dup)
    for br in range(0, SIZE, BOX):
        for bc in range(0, SIZE, BOX):
            dup = _find_duplicate(grid, box_cells(br, bc))
            if dup:
                return ValidationResult(False, ConflictType.BOX, dup)
    return ValidationResult(True, ConflictType.NONE, [])


def _find_duplicate(grid: Grid, unit: List[RC]) -> List[RC]:
    seen: Dict[int, List[RC]] = {}
    for (r, c) in unit:
        v = grid[r][c]
        if v == EMPTY:
            continue
        seen.setdefault(v, []).append((r, c))
    for cells in seen.values():
        if len(cells) > 1:
            return cells
    return []
