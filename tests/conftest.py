from typing import List

import pytest

PUZZLE_ROWS = [
    ".96.4...1",
    "1...6...4",
    "5.481.39.",
    "..795..43",
    ".3..8....",
    "4.5.23.18",
    ".1.63..59",
    ".59.7.83.",
    "..359...7",
]

SOLUTION = [
    [3, 9, 6, 2, 4, 5, 7, 8, 1],
    [1, 7, 8, 3, 6, 9, 5, 2, 4],
    [5, 2, 4, 8, 1, 7, 3, 9, 6],
    [2, 8, 7, 9, 5, 1, 6, 4, 3],
    [9, 3, 1, 4, 8, 6, 2, 7, 5],
    [4, 6, 5, 7, 2, 3, 9, 1, 8],
    [7, 1, 2, 6, 3, 8, 4, 5, 9],
    [6, 5, 9, 1, 7, 4, 8, 3, 2],
    [8, 4, 3, 5, 9, 2, 1, 6, 7],
]

SOLUTION_TEXT = (
    "3 9 6 2 4 5 7 8 1\n"
    "1 7 8 3 6 9 5 2 4\n"
    "5 2 4 8 1 7 3 9 6\n"
    "2 8 7 9 5 1 6 4 3\n"
    "9 3 1 4 8 6 2 7 5\n"
    "4 6 5 7 2 3 9 1 8\n"
    "7 1 2 6 3 8 4 5 9\n"
    "6 5 9 1 7 4 8 3 2\n"
    "8 4 3 5 9 2 1 6 7\n"
    "\n"
)


def is_complete_sudoku(grid: List[List[int]]) -> bool:
    full = list(range(1, 10))
    units = []
    units += [[grid[r][c] for c in range(9)] for r in range(9)]
    units += [[grid[r][c] for r in range(9)] for c in range(9)]
    units += [
        [grid[r][c] for r in range(br, br + 3) for c in range(bc, bc + 3)]
        for br in (0, 3, 6) for bc in (0, 3, 6)
    ]
    return all(sorted(u) == full for u in units)


@pytest.fixture
def puzzle_rows():
    return list(PUZZLE_ROWS)


@pytest.fixture
def solution():
    return [row[:] for row in SOLUTION]


@pytest.fixture
def solution_rows():
    return ["".join(str(v) for v in row) for row in SOLUTION]
