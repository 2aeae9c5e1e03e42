from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List

from trace_puzzle.core.config import settings
from trace_puzzle.schemas.cell_schema import Cell
from trace_puzzle.schemas.edge_schema import Edge


# Output of one walk builder run
class PrimaryPuzzle(BaseModel):
    model_config = ConfigDict(frozen=True)

    endpoints: List[Cell]      # the two path ends, [frontier 0, frontier 1]
    visited_cells: List[Cell]  # discovery order
    edges: List[Edge]


class Puzzle(PrimaryPuzzle):
    grid_size: int


class GenerationStatus(str, Enum):
    UNIQUE = "unique"            # passed the final uniqueness check
    BEST_EFFORT = "best_effort"  # unconstrained fallback, may have several solutions


class GeneratedPuzzle(BaseModel):
    puzzle: Puzzle
    status: GenerationStatus
    attempts: int  # guided attempts spent, fallback excluded

    @property
    def is_guaranteed(self) -> bool:
        return self.status == GenerationStatus.UNIQUE


# Data sent by client
class PuzzleGenerate(BaseModel):
    grid_size: int = Field(default_factory=lambda: settings.DEFAULT_GRID_SIZE)
    seed: Optional[int] = None  # reproducible puzzle for a given size

    @field_validator("grid_size")
    @classmethod
    def grid_size_in_range(cls, value):
        if not settings.MIN_GRID_SIZE <= value <= settings.MAX_GRID_SIZE:
            raise ValueError(
                f"grid_size must be between {settings.MIN_GRID_SIZE} and {settings.MAX_GRID_SIZE}"
            )
        return value


class UniquenessResult(BaseModel):
    unique: bool
    valid: bool
