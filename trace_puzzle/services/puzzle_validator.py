import logging
from collections import Counter

from trace_puzzle.core.config import settings
from trace_puzzle.schemas import Puzzle
from trace_puzzle.services.edge_utils import are_adjacent, is_same_cell
from trace_puzzle.services.path_counter import is_unique

logger = logging.getLogger(__name__)


def is_unique_solution(puzzle: Puzzle) -> bool:
    """
    True when exactly one tracing connects the endpoints through all visited cells.
    Malformed puzzles are reported and treated as not unique.
    """
    if len(puzzle.endpoints) != 2:
        logger.error("Puzzle needs exactly 2 endpoints, got %s", len(puzzle.endpoints))
        return False

    if not puzzle.visited_cells:
        logger.error("Puzzle has no visited cells")
        return False

    return is_unique(puzzle.endpoints, puzzle.visited_cells)


def is_valid_puzzle(puzzle: Puzzle,
                    min_grid_size: int = None,
                    max_grid_size: int = None) -> bool:
    """Structural check: grid bounds, and the edges lay out one simple path between the endpoints"""
    min_grid_size = settings.MIN_GRID_SIZE if min_grid_size is None else min_grid_size
    max_grid_size = settings.MAX_GRID_SIZE if max_grid_size is None else max_grid_size

    if len(puzzle.endpoints) != 2 or not puzzle.visited_cells:
        return False

    if not min_grid_size <= puzzle.grid_size <= max_grid_size:
        return False

    cells = set(puzzle.visited_cells)
    if len(cells) != len(puzzle.visited_cells):
        return False
    if any(not (0 <= cell.x < puzzle.grid_size and 0 <= cell.y < puzzle.grid_size) for cell in cells):
        return False
    if any(endpoint not in cells for endpoint in puzzle.endpoints):
        return False

    start, end = puzzle.endpoints
    if is_same_cell(start, end):
        # a lone cell is the only path whose ends coincide
        return len(cells) == 1 and not puzzle.edges

    if len(puzzle.edges) != len(cells) - 1:
        return False

    degree = Counter()
    neighbours = {cell: [] for cell in cells}
    for edge in puzzle.edges:
        if edge.start not in cells or edge.end not in cells or not are_adjacent(edge.start, edge.end):
            return False
        degree[edge.start] += 1
        degree[edge.end] += 1
        neighbours[edge.start].append(edge.end)
        neighbours[edge.end].append(edge.start)

    for cell in cells:
        expected = 1 if cell in (start, end) else 2
        if degree[cell] != expected:
            return False

    # degrees alone allow a path plus detached loops, so walk it end to end
    previous, current, walked = None, start, 1
    while not is_same_cell(current, end):
        following = [cell for cell in neighbours[current] if cell != previous]
        if not following:  # doubled edge
            return False
        previous, current = current, following[0]
        walked += 1
    return walked == len(cells)
