from pydantic import BaseModel, ConfigDict, model_validator

from trace_puzzle.schemas.cell_schema import Cell


class Edge(BaseModel):
    """Undirected link between two cells. Use edge_utils.is_same_edge to compare,
    start/end order carries no meaning."""
    model_config = ConfigDict(frozen=True)

    start: Cell
    end: Cell

    @model_validator(mode="after")
    def distinct_cells(self):
        if self.start == self.end:
            raise ValueError(f"edge needs two distinct cells, got ({self.start.x}, {self.start.y}) twice")
        return self

    def reversed(self) -> "Edge":
        return Edge(start=self.end, end=self.start)
