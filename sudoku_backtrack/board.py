from __future__ import annotations
import sys
from typing import List, Optional, Sequence, TextIO

from sudoku_backtrack.models import RC, Grid, ErrorKind, SudokuInputError

SIZE = 9
BOX = 3
EMPTY = 0

EMPTY_CHAR = "."
DIGITS = "123456789"


# ------------------ construction ------------------
def new_empty() -> Grid:
    return [[EMPTY] * SIZE for _ in range(SIZE)]


def copy_grid(grid: Grid) -> Grid:
    return [row[:] for row in grid]


def char_to_cell(ch: str) -> int:
    """Map '.' to the empty sentinel and '1'..'9' to their value.

    Only called on characters already accepted by parse_rows.
    """
    if ch == EMPTY_CHAR:
        return EMPTY
    return int(ch)


def parse_rows(rows: Sequence[str]) -> Grid:
    """
    Build a grid from nine 9-character rows over '.' and '1'..'9'.
    Raises SudokuInputError on the first problem found:
    - row count first
    - then each row top to bottom: length, then characters
    Duplicate clues are NOT rejected here; the solver reports them.
    """
    if len(rows) != SIZE:
        raise SudokuInputError(ErrorKind.ARG_COUNT, f"Expected {SIZE} rows, got {len(rows)}")

    grid = new_empty()
    for r, text in enumerate(rows):
        if len(text) != SIZE:
            raise SudokuInputError(
                ErrorKind.ROW_LENGTH,
                f"Row {r+1} has {len(text)} characters, expected {SIZE}",
            )
        for c, ch in enumerate(text):
            if ch != EMPTY_CHAR and ch not in DIGITS:
                raise SudokuInputError(
                    ErrorKind.ILLEGAL_CHAR,
                    f"Invalid char {ch!r} at (r{r+1}, c{c+1})",
                )
            grid[r][c] = char_to_cell(ch)
    return grid


# ------------------ queries ------------------
def find_empty(grid: Grid) -> Optional[RC]:
    """First empty cell in row-major order, or None when the grid is full."""
    for r in range(SIZE):
        for c in range(SIZE):
            if grid[r][c] == EMPTY:
                return r, c
    return None


def is_solved(grid: Grid) -> bool:
    return find_empty(grid) is None


def box_origin(r: int, c: int) -> RC:
    return (r // BOX) * BOX, (c // BOX) * BOX


def box_cells(r: int, c: int) -> List[RC]:
    br, bc = box_origin(r, c)
    return [(rr, cc) for rr in range(br, br + BOX) for cc in range(bc, bc + BOX)]


# ------------------ output ------------------
def format_grid(grid: Grid) -> str:
    lines = [" ".join(str(v) for v in row) for row in grid]
    # trailing blank line after the ninth row
    return "\n".join(lines) + "\n\n"


def print_grid(grid: Grid, out: Optional[TextIO] = None) -> None:
    out = out if out is not None else sys.stdout
    out.write(format_grid(grid))
