# import moduls/libraries
import logging
from fastapi import APIRouter, Depends, HTTPException
from starlette.concurrency import run_in_threadpool


# import form project
from trace_puzzle.core.dependencies import get_puzzle_services
from trace_puzzle.schemas import (
    Puzzle, PuzzleGenerate, GeneratedPuzzle, UniquenessResult,
    SolutionCheck, SolutionResult, LinesAdd, LinesRemove, LinesResponse
)
from trace_puzzle.services import PuzzleServices

logger = logging.getLogger(__name__)

router = APIRouter()


# Generate puzzle
@router.post("/generate", response_model=GeneratedPuzzle)
async def generate_puzzle(puzzle_generate: PuzzleGenerate,
                          services: PuzzleServices = Depends(get_puzzle_services)):
    """Generate a new puzzle. Runs in the thread pool, generation can take a while on big grids"""
    try:
        return await run_in_threadpool(
            services.generate_puzzle, puzzle_generate.grid_size, puzzle_generate.seed
        )
    except ValueError as e:
        logger.warning("Rejected generation request: %s", e)
        raise HTTPException(status_code=422, detail=str(e))


# Check uniqueness and structure of a puzzle
@router.post("/verify", response_model=UniquenessResult)
async def verify_puzzle(puzzle: Puzzle, services: PuzzleServices = Depends(get_puzzle_services)):
    """Re-run the uniqueness check on any puzzle"""
    return await run_in_threadpool(services.verify_puzzle, puzzle)


# Compare drawn lines with the solution
@router.post("/check", response_model=SolutionResult)
async def check_solution(solution_check: SolutionCheck,
                         services: PuzzleServices = Depends(get_puzzle_services)):
    """Is the drawing the solution?"""
    solved = services.check_solution(solution_check.drawn_lines, solution_check.puzzle)
    return SolutionResult(solved=solved)


# Add lines along a drag
@router.post("/lines/add", response_model=LinesResponse)
async def add_lines(lines_add: LinesAdd, services: PuzzleServices = Depends(get_puzzle_services)):
    """Add lines for the cells crossed by a drag, respecting connection limits"""
    drawn_lines = services.add_lines(lines_add.cells, lines_add.drawn_lines, lines_add.puzzle)
    return LinesResponse(drawn_lines=drawn_lines)


# Remove lines at a clicked cell
@router.post("/lines/remove", response_model=LinesResponse)
async def remove_lines(lines_remove: LinesRemove, services: PuzzleServices = Depends(get_puzzle_services)):
    """Remove every line touching the clicked cell"""
    drawn_lines = services.remove_lines(lines_remove.cell, lines_remove.drawn_lines)
    return LinesResponse(drawn_lines=drawn_lines)
