"""Boundary edge emission.

Scans a grid once and yields the unit edges separating dark cells from light
cells or the grid border. Each dark cell contributes its sides in a fixed
clockwise order (left, top, right, bottom, starting from the bottom-left
corner), which is what lets the merger assemble outer boundaries clockwise
and holes counter-clockwise.
"""

from collections.abc import Iterator
from enum import Enum

from rasterpath.domain import Edge, Grid, Point


class Side(Enum):
    """Cell side, valued (neighbour dx, dy, start dx, dy, end dx, dy)."""

    LEFT = (-1, 0, 0, 1, 0, 0)
    TOP = (0, -1, 0, 0, 1, 0)
    RIGHT = (1, 0, 1, 0, 1, 1)
    BOTTOM = (0, 1, 1, 1, 0, 1)

    def edge_for(self, x: int, y: int) -> Edge:
        """Build this side's edge for the cell at (x, y)."""
        _, _, sx, sy, ex, ey = self.value
        return Edge(Point(x + sx, y + sy), Point(x + ex, y + ey))

    def faces_light(self, grid: Grid, x: int, y: int) -> bool:
        """Check whether the neighbour across this side is light or off-grid."""
        nx, ny = self.value[0], self.value[1]
        return not grid.is_dark(x + nx, y + ny)


def iter_boundary_edges(grid: Grid) -> Iterator[Edge]:
    """Yield every boundary edge of the grid's dark region.

    Cells are scanned row-major. No two yielded edges are identical since
    every side belongs to exactly one dark cell.

    Args:
        grid: Raster to scan

    Yields:
        Directed unit edges
    """
    for y in range(grid.height):
        for x in range(grid.width):
            if not grid.is_dark(x, y):
                continue
            for side in Side:
                if side.faces_light(grid, x, y):
                    yield side.edge_for(x, y)
