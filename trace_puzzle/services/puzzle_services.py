import logging
import random
from typing import Callable, List, Optional

from trace_puzzle.core.config import Settings, settings as default_settings
from trace_puzzle.schemas import (
    Cell, Edge, Puzzle, GeneratedPuzzle, GenerationStatus, UniquenessResult
)
from trace_puzzle.services.line_manager import add_lines_from_cells, remove_lines_from_cell
from trace_puzzle.services.puzzle_validator import is_unique_solution, is_valid_puzzle
from trace_puzzle.services.solution_checker import check_solution
from trace_puzzle.services.walk_builders import generate_primary_puzzle, generate_unique_primary_puzzle

logger = logging.getLogger(__name__)


class PuzzleServices:
    """ Handles puzzle generation and the checks the game runs against a puzzle"""

    def __init__(self, settings: Settings = None, rng: random.Random = None):
        self.settings = settings or default_settings
        self.rng = rng

    def _rng_for(self, seed: Optional[int]) -> random.Random:
        """Per-call generator: request seed, else injected rng, else configured seed"""
        if seed is not None:
            return random.Random(seed)
        if self.rng is not None:
            return self.rng
        return random.Random(self.settings.RANDOM_SEED)

    # generate puzzle
    def generate_puzzle(
            self,
            grid_size: int,
            seed: Optional[int] = None,
            should_stop: Optional[Callable[[], bool]] = None,
    ) -> GeneratedPuzzle:
        """
        Build a uniquely traceable puzzle that fits a grid_size x grid_size board.

        Runs up to MAX_ATTEMPTS guided walks and re-checks each finished walk as
        a whole, since screening while growing does not prove the final shape
        unique. When every attempt fails, an unconstrained walk is returned
        tagged BEST_EFFORT: structurally fine but possibly several solutions.
        """
        if not self.settings.MIN_GRID_SIZE <= grid_size <= self.settings.MAX_GRID_SIZE:
            raise ValueError(
                f"grid_size must be between {self.settings.MIN_GRID_SIZE} "
                f"and {self.settings.MAX_GRID_SIZE}, got {grid_size}"
            )

        rng = self._rng_for(seed)
        max_attempts = self.settings.MAX_ATTEMPTS
        logger.info("Generating puzzle: grid_size=%s seed=%s", grid_size, seed)

        for attempt in range(1, max_attempts + 1):
            primary_result = generate_unique_primary_puzzle(
                grid_size,
                rng=rng,
                max_consecutive_failures=self.settings.MAX_CONSECUTIVE_FAILURES,
                probe_min_cells=self.settings.PROBE_MIN_CELLS,
                should_stop=should_stop,
            )
            if primary_result is None:
                logger.debug("Attempt %s: guided walk gave up", attempt)
                continue

            puzzle = Puzzle(grid_size=grid_size, **primary_result.model_dump())

            # final check over the finished shape
            if is_unique_solution(puzzle):
                logger.info(
                    "Generated unique puzzle after %s attempt(s): %s cells",
                    attempt, len(puzzle.visited_cells)
                )
                return GeneratedPuzzle(puzzle=puzzle, status=GenerationStatus.UNIQUE, attempts=attempt)

            logger.debug("Attempt %s: finished walk is not uniquely traceable", attempt)

        # fallback: plain random walk
        logger.warning(
            "No unique puzzle after %s attempts (grid_size=%s), serving best-effort puzzle",
            max_attempts, grid_size
        )
        primary_result = generate_primary_puzzle(grid_size, rng=rng)
        puzzle = Puzzle(grid_size=grid_size, **primary_result.model_dump())
        return GeneratedPuzzle(puzzle=puzzle, status=GenerationStatus.BEST_EFFORT, attempts=max_attempts)

    # verify puzzle
    def verify_puzzle(self, puzzle: Puzzle) -> UniquenessResult:
        valid = is_valid_puzzle(
            puzzle,
            min_grid_size=self.settings.MIN_GRID_SIZE,
            max_grid_size=self.settings.MAX_GRID_SIZE,
        )
        if not valid:
            # enumeration is exponential, only run it on puzzles inside the grid limits
            logger.info("Skipping uniqueness check for invalid puzzle (grid_size=%s)", puzzle.grid_size)
            return UniquenessResult(unique=False, valid=False)
        return UniquenessResult(unique=is_unique_solution(puzzle), valid=True)

    def check_solution(self, drawn_lines: List[Edge], puzzle: Puzzle) -> bool:
        solved = check_solution(drawn_lines, puzzle)
        if solved:
            logger.info("Puzzle solved: %s lines", len(drawn_lines))
        return solved

    def add_lines(self, cells: List[Cell], drawn_lines: List[Edge], puzzle: Puzzle) -> List[Edge]:
        return add_lines_from_cells(cells, drawn_lines, puzzle)

    def remove_lines(self, cell: Cell, drawn_lines: List[Edge]) -> List[Edge]:
        return remove_lines_from_cell(cell, drawn_lines)
