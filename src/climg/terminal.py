import os
import sys

from climg.model import DEFAULT_GRID, ConsoleGrid


def get_terminal_size(stream=None) -> ConsoleGrid:
    """Return (columns, rows) of the terminal behind ``stream``, or 80x30 if it can't be queried."""
    stream = sys.stdout if stream is None else stream
    try:
        size = os.get_terminal_size(stream.fileno())
    except (AttributeError, OSError, ValueError):
        return DEFAULT_GRID
    if size.columns < 1 or size.lines < 1:
        return DEFAULT_GRID
    return ConsoleGrid(size.columns, size.lines)
