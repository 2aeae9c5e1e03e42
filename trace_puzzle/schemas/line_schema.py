from pydantic import BaseModel
from typing import List

from trace_puzzle.schemas.cell_schema import Cell
from trace_puzzle.schemas.edge_schema import Edge
from trace_puzzle.schemas.puzzle_schema import Puzzle


class SolutionCheck(BaseModel):
    puzzle: Puzzle
    drawn_lines: List[Edge] = []


class SolutionResult(BaseModel):
    solved: bool


# cells the pointer crossed during one drag, in order
class LinesAdd(BaseModel):
    puzzle: Puzzle
    cells: List[Cell]
    drawn_lines: List[Edge] = []


class LinesRemove(BaseModel):
    cell: Cell
    drawn_lines: List[Edge] = []


class LinesResponse(BaseModel):
    drawn_lines: List[Edge]
