"""Geometric operations on integer grid points.

This module provides the small amount of exact arithmetic the pipeline needs:
- Cross products and collinearity tests
- Turn classification between consecutive unit segments
- Signed area (shoelace formula)

All coordinates are integers, so every test here is exact and needs no
tolerance. All functions are pure and stateless.
"""

from enum import Enum, auto

from rasterpath.domain import Point


class Turn(Enum):
    """Turn made when one segment continues into the next.

    Named for the y-down raster frame, where a dark cell's own sides are
    walked clockwise.
    """

    CLOCKWISE = auto()
    STRAIGHT = auto()
    COUNTER_CLOCKWISE = auto()
    REVERSE = auto()


def cross_product(p1: Point, p2: Point, p3: Point) -> int:
    """Calculate the 2D cross product of (p1 - p2) and (p3 - p2).

    Args:
        p1: First point
        p2: Pivot point
        p3: Third point

    Returns:
        (p1.x - p2.x)(p3.y - p2.y) - (p1.y - p2.y)(p3.x - p2.x)

    Examples:
        >>> cross_product(Point(0, 0), Point(1, 0), Point(2, 0))
        0
        >>> cross_product(Point(0, 0), Point(1, 0), Point(1, 1))
        -1
    """
    return (p1.x - p2.x) * (p3.y - p2.y) - (p1.y - p2.y) * (p3.x - p2.x)


def is_collinear(p1: Point, p2: Point, p3: Point) -> bool:
    """Check whether three points lie on one line.

    Examples:
        >>> is_collinear(Point(0, 0), Point(0, 1), Point(0, 5))
        True
        >>> is_collinear(Point(0, 0), Point(0, 1), Point(1, 1))
        False
    """
    return cross_product(p1, p2, p3) == 0


def classify_turn(incoming: tuple[int, int], outgoing: tuple[int, int]) -> Turn:
    """Classify the turn from one direction vector into the next.

    Args:
        incoming: Direction (dx, dy) of the segment arriving at the vertex
        outgoing: Direction (dx, dy) of the segment leaving the vertex

    Returns:
        Turn classification

    Examples:
        >>> classify_turn((0, 1), (-1, 0))  # down, then left
        <Turn.CLOCKWISE: 1>
        >>> classify_turn((0, 1), (1, 0))  # down, then right
        <Turn.COUNTER_CLOCKWISE: 3>
    """
    cross = incoming[0] * outgoing[1] - incoming[1] * outgoing[0]
    if cross > 0:
        return Turn.CLOCKWISE
    if cross < 0:
        return Turn.COUNTER_CLOCKWISE
    dot = incoming[0] * outgoing[0] + incoming[1] * outgoing[1]
    return Turn.STRAIGHT if dot > 0 else Turn.REVERSE


def signed_area(points: list[Point]) -> int:
    """Calculate signed area of a polygon using the shoelace formula.

    In the y-down raster frame clockwise polygons have positive area.

    Args:
        points: Polygon vertices, closing segment implicit

    Returns:
        Signed area; 0 for degenerate polygons

    Examples:
        >>> signed_area([Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)])
        1
        >>> signed_area([Point(0, 0), Point(0, 1), Point(1, 1), Point(1, 0)])
        -1
    """
    n = len(points)
    if n < 3:
        return 0

    twice_area = 0
    for i in range(n):
        j = (i + 1) % n
        twice_area += points[i].x * points[j].y
        twice_area -= points[j].x * points[i].y

    return twice_area // 2
