from typing import List

from trace_puzzle.schemas import Edge, Puzzle
from trace_puzzle.services.edge_utils import is_same_edge_set


def check_solution(drawn_lines: List[Edge], puzzle: Puzzle) -> bool:
    """
    True when the drawn lines are exactly the puzzle's solution edges, in any
    order and direction. Comparing against the one stored solution is enough
    because generated puzzles have a single tracing.
    """
    if len(drawn_lines) != len(puzzle.edges):
        return False
    return is_same_edge_set(drawn_lines, puzzle.edges)
