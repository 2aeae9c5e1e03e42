from trace_puzzle.schemas.cell_schema import Cell, Move
from trace_puzzle.schemas.edge_schema import Edge
from trace_puzzle.schemas.puzzle_schema import (
    PrimaryPuzzle, Puzzle, GenerationStatus, GeneratedPuzzle, PuzzleGenerate, UniquenessResult
)
from trace_puzzle.schemas.line_schema import SolutionCheck, SolutionResult, LinesAdd, LinesRemove, LinesResponse
