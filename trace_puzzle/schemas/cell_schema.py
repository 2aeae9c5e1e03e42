from pydantic import BaseModel, ConfigDict
from typing import Literal


class Cell(BaseModel):
    """Grid coordinate. Frozen so cells can live in sets and dict keys."""
    model_config = ConfigDict(frozen=True)

    x: int
    y: int

    def shifted(self, dx: int, dy: int) -> "Cell":
        return Cell(x=self.x + dx, y=self.y + dy)


# a proposed extension of one of the two growing path ends
class Move(BaseModel):
    model_config = ConfigDict(frozen=True)

    endpoint: Literal[0, 1]
    source: Cell
    target: Cell
