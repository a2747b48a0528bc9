from dataclasses import dataclass
from typing import NamedTuple

IntervalTable = list[tuple[int, int]]


class ConsoleGrid(NamedTuple):
    columns: int
    rows: int


DEFAULT_GRID = ConsoleGrid(80, 30)


@dataclass(frozen=True)
class Cell:
    """Pixel region [x0, x1) x [y0, y1) covered by one output character."""

    x0: int
    x1: int
    y0: int
    y1: int

    @property
    def width(self) -> int:
        return self.x1 - self.x0

    @property
    def height(self) -> int:
        return self.y1 - self.y0

    @property
    def area(self) -> int:
        return self.width * self.height
