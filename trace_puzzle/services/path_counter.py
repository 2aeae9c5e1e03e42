"""
Counts the ways to trace every visited cell exactly once between two endpoints.

The graph is the grid adjacency induced by the visited cells. Counting is an
exhaustive depth-first search, exponential in the number of cells, so it stops
at the second completion: callers only need to tell 0, 1 and "several" apart.
"""
import logging
from typing import Dict, List, Sequence

from trace_puzzle.schemas import Cell

logger = logging.getLogger(__name__)

MULTIPLE_PATHS = 2  # returned for "2 or more"


def _build_adjacency(keys: set, width: int) -> Dict[int, List[int]]:
    """Neighbour lists over packed keys (row * width + column)."""
    adjacency = {}
    for key in keys:
        column = key % width
        candidates = [key - width, key + width]  # up, down
        if column + 1 < width:
            candidates.append(key + 1)  # right
        if column > 0:
            candidates.append(key - 1)  # left
        adjacency[key] = [neighbour for neighbour in candidates if neighbour in keys]
    return adjacency


def count_paths(endpoints: Sequence[Cell], visited_cells: Sequence[Cell]) -> int:
    """
    Number of simple paths from endpoints[0] to endpoints[1] that cover every
    visited cell: 0, 1, or MULTIPLE_PATHS meaning two or more.

    Empty input, endpoints outside the cell set, or duplicated cells have no
    valid tracing and count as 0.
    """
    if len(endpoints) != 2 or not visited_cells:
        return 0

    min_x = min(cell.x for cell in visited_cells)
    min_y = min(cell.y for cell in visited_cells)
    width = max(cell.x for cell in visited_cells) - min_x + 1
    height = max(cell.y for cell in visited_cells) - min_y + 1

    def pack(cell: Cell) -> int:
        return (cell.y - min_y) * width + (cell.x - min_x)

    keys = {pack(cell) for cell in visited_cells}
    if len(keys) != len(visited_cells):
        logger.debug("Duplicate cells in visited set, no tracing possible")
        return 0

    start, end = pack(endpoints[0]), pack(endpoints[1])
    if start not in keys or end not in keys:
        return 0

    total = len(keys)
    if start == end:
        # a lone cell traces itself; otherwise the walk can never return to it
        return 1 if total == 1 else 0

    adjacency = _build_adjacency(keys, width)

    on_path = bytearray(width * height)
    on_path[start] = 1
    depth = 1
    found = 0
    # each frame: (cell key, iterator over the neighbours not yet tried)
    stack = [(start, iter(adjacency[start]))]

    while stack and found < MULTIPLE_PATHS:
        key, neighbours = stack[-1]
        neighbour = next(neighbours, None)

        if neighbour is None:
            stack.pop()
            on_path[key] = 0
            depth -= 1
            continue

        if on_path[neighbour]:
            continue

        if neighbour == end:
            # the end cell is terminal, never extended and never marked
            if depth + 1 == total:
                found += 1
            continue

        on_path[neighbour] = 1
        depth += 1
        stack.append((neighbour, iter(adjacency[neighbour])))

    logger.debug("Counted %s tracing(s) over %s cells", found, total)
    return found


def is_unique(endpoints: Sequence[Cell], visited_cells: Sequence[Cell]) -> bool:
    return count_paths(endpoints, visited_cells) == 1
