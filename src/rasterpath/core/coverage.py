"""Nonzero-rule rasterization of outlines.

Used to check that a set of outlines reproduces the grid it was traced from:
each cell centre is classified by the winding number of all outlines around
it, computed one row at a time from the vertical segments crossing that row.
"""

from collections.abc import Iterable

from rasterpath.domain import Grid, Outline
from rasterpath.exceptions import CoverageMismatchError


def _row_crossings(outlines: list[Outline], height: int) -> list[dict[int, int]]:
    """Collect signed vertical-segment crossings per row.

    A segment from (x, y0) to (x, y1) crosses the centre line of every row
    between them; it counts +1 when heading down and -1 when heading up.

    Returns:
        For each row, a mapping of crossing x to summed sign
    """
    rows: list[dict[int, int]] = [{} for _ in range(height)]
    for outline in outlines:
        points = outline.points
        n = len(points)
        for i in range(n):
            a, b = points[i], points[(i + 1) % n]
            if a.x != b.x:
                continue
            sign = 1 if b.y > a.y else -1
            for row in range(max(min(a.y, b.y), 0), min(max(a.y, b.y), height)):
                rows[row][a.x] = rows[row].get(a.x, 0) + sign
    return rows


def winding_numbers(outlines: Iterable[Outline], width: int, height: int) -> list[list[int]]:
    """Compute the winding number of the outlines around every cell centre.

    The winding number of cell (cx, cy) is the signed count of crossings to
    the right of its centre (cx + 0.5, cy + 0.5).

    Args:
        outlines: Closed outlines
        width: Number of columns
        height: Number of rows

    Returns:
        Rows of winding numbers
    """
    crossings = _row_crossings(list(outlines), height)
    result: list[list[int]] = []
    for row in crossings:
        winding = [0] * width
        total = sum(sign for x, sign in row.items() if x > width)
        for cx in range(width - 1, -1, -1):
            total += row.get(cx + 1, 0)
            winding[cx] = total
        result.append(winding)
    return result


def rasterize_outlines(outlines: Iterable[Outline], width: int, height: int) -> Grid:
    """Fill outlines with the nonzero rule and sample every cell centre.

    Args:
        outlines: Closed outlines
        width: Number of columns
        height: Number of rows

    Returns:
        Grid with dark cells where the winding number is nonzero
    """
    rows = winding_numbers(outlines, width, height)
    return Grid.from_rows([[w != 0 for w in row] for row in rows])


def verify_coverage(grid: Grid, outlines: Iterable[Outline]) -> None:
    """Check that outlines reproduce grid exactly under nonzero fill.

    Args:
        grid: Source raster
        outlines: Outlines traced from it

    Raises:
        CoverageMismatchError: If any cell is classified differently
    """
    filled = rasterize_outlines(outlines, grid.width, grid.height)
    mismatched = [
        (x, y)
        for y in range(grid.height)
        for x in range(grid.width)
        if filled.is_dark(x, y) != grid.is_dark(x, y)
    ]
    if mismatched:
        raise CoverageMismatchError(mismatched)
