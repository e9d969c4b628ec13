from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

RC = Tuple[int, int]  # (row, col)
Grid = List[List[int]]  # 9x9, 0 = empty


class ConflictType(str, Enum):
    ROW = "ROW"
    COL = "COL"
    BOX = "BOX"
    NONE = "NONE"


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    conflict_type: ConflictType = ConflictType.NONE
    conflict_cells: List[RC] = None


@dataclass(frozen=True)
class SolutionResult:
    is_solvable: bool
    solution_grid: Optional[Grid] = None


class ErrorKind(str, Enum):
    ARG_COUNT = "ARG_COUNT"
    ROW_LENGTH = "ROW_LENGTH"
    ILLEGAL_CHAR = "ILLEGAL_CHAR"
    UNSOLVABLE = "UNSOLVABLE"


class SudokuInputError(ValueError):
    """Raised when the command line does not describe a 9x9 grid."""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
