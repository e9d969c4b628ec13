import argparse
import sys
from typing import List, Optional, TextIO

from sudoku_backtrack.board import parse_rows, print_grid
from sudoku_backtrack.models import ErrorKind, SudokuInputError
from sudoku_backtrack.solver import solve

ERROR_TEXT = "Error"


class RowArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing usage and exiting."""

    def error(self, message):
        raise SudokuInputError(ErrorKind.ARG_COUNT, message)


def build_parser() -> RowArgumentParser:
    p = RowArgumentParser(
        prog="sudoku-backtrack",
        description="Solve a 9x9 Sudoku given as nine rows of '.' and 1-9.",
        add_help=False,
    )
    p.add_argument("rows", nargs="*", help="9-char row, '.' for empty")
    return p


def run(argv: List[str], out: Optional[TextIO] = None) -> int:
    out = out if out is not None else sys.stdout
    try:
        args = build_parser().parse_args(argv)
        # argparse swallows a bare "--", every token must be a row
        if len(args.rows) != len(argv):
            raise SudokuInputError(ErrorKind.ARG_COUNT, "Unexpected '--' argument")
        grid = parse_rows(args.rows)
    except ValueError:
        print(ERROR_TEXT, file=out)
        return 1

    if not solve(grid):
        print(ERROR_TEXT, file=out)
        return 1

    print_grid(grid, out)
    return 0


def main():
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
