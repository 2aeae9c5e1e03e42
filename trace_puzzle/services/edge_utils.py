from typing import List, Optional, Iterable

from trace_puzzle.schemas import Cell, Edge


def is_same_cell(a: Cell, b: Cell) -> bool:
    return a.x == b.x and a.y == b.y


def is_same_edge(edge1: Edge, edge2: Edge) -> bool:
    """Same edge regardless of direction: (a, b) == (b, a)"""
    return (
        (is_same_cell(edge1.start, edge2.start) and is_same_cell(edge1.end, edge2.end))
        or (is_same_cell(edge1.start, edge2.end) and is_same_cell(edge1.end, edge2.start))
    )


def contains_edge(edges: Iterable[Edge], target: Edge) -> bool:
    return any(is_same_edge(edge, target) for edge in edges)


def is_same_edge_set(edges1: List[Edge], edges2: List[Edge]) -> bool:
    """
    Order-independent comparison of two edge lists: equal length and every edge
    of each list found in the other. Containment both ways keeps a list that
    repeats one edge from matching a list of distinct edges.
    """
    if len(edges1) != len(edges2):
        return False
    return (all(contains_edge(edges2, edge) for edge in edges1)
            and all(contains_edge(edges1, edge) for edge in edges2))


def are_adjacent(cell1: Cell, cell2: Cell) -> bool:
    """4-neighbourhood only, diagonals are not adjacent"""
    dx = abs(cell1.x - cell2.x)
    dy = abs(cell1.y - cell2.y)
    return (dx == 1 and dy == 0) or (dx == 0 and dy == 1)


def get_connected_edges(edges: Iterable[Edge], cell: Cell) -> List[Edge]:
    return [edge for edge in edges if is_same_cell(edge.start, cell) or is_same_cell(edge.end, cell)]


def get_other_cell(edge: Edge, cell: Cell) -> Optional[Cell]:
    if is_same_cell(edge.start, cell):
        return edge.end
    if is_same_cell(edge.end, cell):
        return edge.start
    return None
