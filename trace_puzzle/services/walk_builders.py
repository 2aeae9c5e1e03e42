"""
Random path growth for trace puzzles.

A walk starts on a single origin cell and grows from both of its ends. Every
round collects the legal one-cell extensions of either end and takes one at
random, until no extension is left. The guided variant screens each extension
with the path counter so the walk stays uniquely traceable while it grows.
"""
import logging
import random
from collections import deque
from typing import Callable, List, Optional

from trace_puzzle.schemas import Cell, Edge, Move, PrimaryPuzzle
from trace_puzzle.services.path_counter import is_unique

logger = logging.getLogger(__name__)

# up, right, down, left
DIRECTIONS = ((0, -1), (1, 0), (0, 1), (-1, 0))

MAX_CONSECUTIVE_FAILURES = 10
PROBE_MIN_CELLS = 5


class GenerationAbandoned(RuntimeError):
    """Raised when the caller asks a running generation to stop."""


class PathGrowth:
    """
    One path with two growing ends. The left end of the deque is frontier 0,
    the right end frontier 1; both start on the origin cell.
    """

    def __init__(self, origin: Optional[Cell] = None):
        origin = origin or Cell(x=0, y=0)
        self.path = deque([origin])
        self.visited_cells: List[Cell] = [origin]  # discovery order
        self.edges: List[Edge] = []
        self._visited = {origin}
        self.min_x = self.max_x = origin.x
        self.min_y = self.max_y = origin.y

    @property
    def endpoints(self) -> List[Cell]:
        return [self.path[0], self.path[-1]]

    def frontier(self, endpoint: int) -> Cell:
        return self.path[0] if endpoint == 0 else self.path[-1]

    def is_visited(self, cell: Cell) -> bool:
        return cell in self._visited

    def fits(self, cell: Cell, grid_size: int) -> bool:
        """Bounding box stays narrower and shorter than grid_size with the cell added"""
        x_range = max(self.max_x, cell.x) - min(self.min_x, cell.x)
        y_range = max(self.max_y, cell.y) - min(self.min_y, cell.y)
        return x_range < grid_size and y_range < grid_size

    def tentative_endpoints(self, move: Move) -> List[Cell]:
        endpoints = self.endpoints
        endpoints[move.endpoint] = move.target
        return endpoints

    def apply(self, move: Move):
        if move.endpoint == 0:
            self.path.appendleft(move.target)
        else:
            self.path.append(move.target)
        self.visited_cells.append(move.target)
        self._visited.add(move.target)
        self.edges.append(Edge(start=move.source, end=move.target))
        self.min_x = min(self.min_x, move.target.x)
        self.max_x = max(self.max_x, move.target.x)
        self.min_y = min(self.min_y, move.target.y)
        self.max_y = max(self.max_y, move.target.y)

    def candidate_moves(self, grid_size: int) -> List[Move]:
        """Every extension onto an unvisited cell that keeps the bounding box in range"""
        moves = []
        for endpoint in (0, 1):
            current = self.frontier(endpoint)
            for dx, dy in DIRECTIONS:
                target = current.shifted(dx, dy)
                if self.is_visited(target) or not self.fits(target, grid_size):
                    continue
                moves.append(Move(endpoint=endpoint, source=current, target=target))
        return moves

    def to_puzzle(self) -> PrimaryPuzzle:
        return normalize_coordinates(PrimaryPuzzle(
            endpoints=self.endpoints,
            visited_cells=list(self.visited_cells),
            edges=list(self.edges),
        ))


def normalize_coordinates(result: PrimaryPuzzle) -> PrimaryPuzzle:
    """Translate every cell so the smallest x and y become 0."""
    min_x = min(cell.x for cell in result.visited_cells)
    min_y = min(cell.y for cell in result.visited_cells)

    def shift(cell: Cell) -> Cell:
        return cell.shifted(-min_x, -min_y)

    return PrimaryPuzzle(
        endpoints=[shift(cell) for cell in result.endpoints],
        visited_cells=[shift(cell) for cell in result.visited_cells],
        edges=[Edge(start=shift(edge.start), end=shift(edge.end)) for edge in result.edges],
    )


def generate_primary_puzzle(grid_size: int, rng: Optional[random.Random] = None) -> PrimaryPuzzle:
    """
    Grow a random walk until neither end can move.
    No size floor and no uniqueness guarantee, used as the last-resort fallback.
    """
    rng = rng or random.Random()
    growth = PathGrowth()

    while True:
        moves = growth.candidate_moves(grid_size)
        if not moves:
            break
        growth.apply(rng.choice(moves))

    logger.debug("Unconstrained walk stopped at %s cells", len(growth.visited_cells))
    return growth.to_puzzle()


def generate_unique_primary_puzzle(
        grid_size: int,
        rng: Optional[random.Random] = None,
        max_consecutive_failures: int = MAX_CONSECUTIVE_FAILURES,
        probe_min_cells: int = PROBE_MIN_CELLS,
        should_stop: Optional[Callable[[], bool]] = None,
) -> Optional[PrimaryPuzzle]:
    """
    Grow a random walk, keeping only extensions after which the walk can still
    be traced in exactly one way.

    Walks of probe_min_cells cells or fewer skip the check. A dead end finishes
    the walk once it covers at least 2 * grid_size cells; shorter walks retry
    the round and give up with None after max_consecutive_failures dead ends
    in a row.
    """
    rng = rng or random.Random()
    growth = PathGrowth()
    consecutive_failures = 0

    while True:
        if should_stop is not None and should_stop():
            raise GenerationAbandoned("Guided walk stopped by caller")

        valid_moves = []
        for move in growth.candidate_moves(grid_size):
            tentative_visited = growth.visited_cells + [move.target]
            if len(tentative_visited) > probe_min_cells and not is_unique(
                    growth.tentative_endpoints(move), tentative_visited):
                continue
            valid_moves.append(move)

        if not valid_moves:
            consecutive_failures += 1
            if consecutive_failures >= max_consecutive_failures:
                logger.debug("Guided walk gave up at %s cells", len(growth.visited_cells))
                return None
            if len(growth.visited_cells) >= grid_size * 2:
                break
            continue

        consecutive_failures = 0
        growth.apply(rng.choice(valid_moves))

    return growth.to_puzzle()
