"""Collinear simplification of closed loops."""

from collections.abc import Sequence

from rasterpath.core.geometry import is_collinear
from rasterpath.domain import Point
from rasterpath.exceptions import DegenerateLoopError


def simplify_loop(points: Sequence[Point]) -> list[Point]:
    """Reduce a closed point chain to its corner vertices.

    Walks the chain replacing the middle point of every collinear triple,
    drops the repeated closing point, and finally removes the start vertex
    if it sits in the middle of a straight run across the seam.

    Args:
        points: Closed chain, usually with the last point repeating the first

    Returns:
        Polygon vertices with no collinear neighbours, first != last

    Raises:
        DegenerateLoopError: If fewer than three vertices remain

    Examples:
        >>> square = [Point(0, 1), Point(0, 0), Point(1, 0), Point(2, 0),
        ...           Point(2, 1), Point(1, 1), Point(0, 1)]
        >>> simplify_loop(square)
        [Point(x=0, y=1), Point(x=0, y=0), Point(x=2, y=0), Point(x=2, y=1)]
    """
    simplified: list[Point] = []
    for point in points:
        if len(simplified) >= 2 and is_collinear(simplified[-2], simplified[-1], point):
            simplified[-1] = point
        else:
            simplified.append(point)

    if len(simplified) > 1 and simplified[0] == simplified[-1]:
        simplified.pop()

    if len(simplified) >= 3 and is_collinear(simplified[-1], simplified[0], simplified[1]):
        simplified.pop(0)

    if len(simplified) < 3:
        raise DegenerateLoopError(list(points))

    return simplified
