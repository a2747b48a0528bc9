from collections.abc import Iterator

from climg.model import Cell, ConsoleGrid, IntervalTable


def axis_intervals(extent: int, count: int) -> IntervalTable:
    """Split ``[0, extent)`` into ``count`` near-uniform ``(start, end)`` bins.

    Each bin is computed from its own index. When ``count > extent`` some bins
    would be empty; those are widened to one pixel, so neighbouring bins can
    share a pixel.
    """
    if extent <= 0 or count <= 0:
        raise ValueError(f"extent and count must be positive, got {extent} and {count}")
    table = []
    for i in range(count):
        start = i * extent // count
        end = (i + 1) * extent // count
        if end <= start:
            end = start + 1
        table.append((start, end))
    return table


def partition(width: int, height: int, grid: ConsoleGrid) -> tuple[IntervalTable, IntervalTable]:
    """Return (column intervals, row intervals) mapping an image onto a console grid."""
    return axis_intervals(width, grid.columns), axis_intervals(height, grid.rows)


def cells(columns: IntervalTable, rows: IntervalTable) -> Iterator[Cell]:
    for y0, y1 in rows:
        for x0, x1 in columns:
            yield Cell(x0, x1, y0, y1)
