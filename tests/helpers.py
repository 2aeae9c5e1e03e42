from trace_puzzle.schemas import Cell, Edge, Puzzle


def cell(x, y):
    return Cell(x=x, y=y)


def edge(a, b):
    return Edge(start=cell(*a), end=cell(*b))


def make_puzzle(grid_size, path):
    """Puzzle whose solution is the given ordered list of (x, y) points"""
    cells = [cell(*point) for point in path]
    return Puzzle(
        grid_size=grid_size,
        endpoints=[cells[0], cells[-1]],
        visited_cells=cells,
        edges=[Edge(start=a, end=b) for a, b in zip(cells, cells[1:])],
    )


def block(width, height):
    """Every cell of a width x height rectangle anchored at the origin"""
    return [cell(x, y) for y in range(height) for x in range(width)]


def degrees(puzzle):
    counts = {c: 0 for c in puzzle.visited_cells}
    for e in puzzle.edges:
        counts[e.start] += 1
        counts[e.end] += 1
    return counts
