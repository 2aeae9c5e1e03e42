from typing import List

from trace_puzzle.schemas import Cell, Edge, Puzzle
from trace_puzzle.services.edge_utils import (
    is_same_cell, contains_edge, get_connected_edges, are_adjacent
)


def max_connections(cell: Cell, puzzle: Puzzle) -> int:
    """Endpoints take a single line, every other cell two"""
    return 1 if any(is_same_cell(endpoint, cell) for endpoint in puzzle.endpoints) else 2


def add_lines_from_cells(cells: List[Cell], existing_lines: List[Edge], puzzle: Puzzle) -> List[Edge]:
    """
    Turn the cells crossed by a drag into lines.

    Each consecutive pair becomes a line unless it leaves the puzzle path, is
    already drawn, or one of its cells is already at its connection limit, in
    which case the pair is skipped and the rest of the drag still applies.
    Returns a new list.
    """
    new_lines = list(existing_lines)

    for cell1, cell2 in zip(cells, cells[1:]):
        # drag tracking only reports neighbouring cells; anything else is noise
        if not are_adjacent(cell1, cell2):
            continue
        if not is_valid_cell(cell1, puzzle) or not is_valid_cell(cell2, puzzle):
            continue

        new_edge = Edge(start=cell1, end=cell2)
        if contains_edge(new_lines, new_edge):
            continue

        if len(get_connected_edges(new_lines, cell1)) >= max_connections(cell1, puzzle):
            continue
        if len(get_connected_edges(new_lines, cell2)) >= max_connections(cell2, puzzle):
            continue

        new_lines.append(new_edge)

    return new_lines


def remove_lines_from_cell(clicked_cell: Cell, existing_lines: List[Edge]) -> List[Edge]:
    """Drop every line touching the cell, keep the rest"""
    return [
        edge for edge in existing_lines
        if not is_same_cell(edge.start, clicked_cell) and not is_same_cell(edge.end, clicked_cell)
    ]


def is_valid_cell(cell: Cell, puzzle: Puzzle) -> bool:
    """Only cells on the puzzle path accept lines"""
    return any(is_same_cell(visited, cell) for visited in puzzle.visited_cells)
