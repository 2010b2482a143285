"""Core geometric types for outline representation.

This module defines the fundamental geometric types used throughout rasterpath:
- Point: An integer grid corner
- Edge: A directed unit segment of a cell boundary
- Outline: A closed, simplified boundary loop
- WindingDirection: Enum for outline winding direction

All coordinates live in corner space: cell (cx, cy) occupies the square with
corners (cx, cy) and (cx + 1, cy + 1), and y grows downward.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from rasterpath.exceptions import InvalidEdgeError


class WindingDirection(Enum):
    """Outline winding direction in the y-down raster frame.

    - Outer boundaries wind clockwise
    - Hole boundaries wind counter-clockwise

    Both fill correctly under the nonzero rule.
    """

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()


@dataclass(frozen=True, slots=True)
class Point:
    """A grid corner with integer coordinates.

    Immutable and hashable so it can key the merger's endpoint maps.
    Equality is exact; there is no tolerance.

    Attributes:
        x: Column of the corner, 0..width
        y: Row of the corner, 0..height
    """

    x: int
    y: int

    def to_tuple(self) -> tuple[int, int]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=data["x"], y=data["y"])


@dataclass(frozen=True, slots=True)
class Edge:
    """A directed unit segment on a dark cell's boundary.

    Attributes:
        start: Corner the edge leaves
        end: Corner the edge reaches, exactly one step from start

    Raises:
        InvalidEdgeError: If start and end are not one unit apart
    """

    start: Point
    end: Point

    def __post_init__(self) -> None:
        if abs(self.end.x - self.start.x) + abs(self.end.y - self.start.y) != 1:
            raise InvalidEdgeError(self.start, self.end)

    @property
    def direction(self) -> tuple[int, int]:
        """Unit step (dx, dy) from start to end."""
        return (self.end.x - self.start.x, self.end.y - self.start.y)


@dataclass(frozen=True)
class Outline:
    """A closed polygon tracing one connected boundary contour.

    The closing segment from the last point back to the first is implicit.
    Outer boundaries wind clockwise and holes counter-clockwise, so a
    nonzero fill of all outlines reproduces the dark cells.

    Attributes:
        points: Polygon vertices, at least three, no collinear neighbours
    """

    points: tuple[Point, ...]

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def signed_area(self) -> int:
        """Calculate signed area using the shoelace formula.

        With y pointing down, clockwise outlines have positive area and
        counter-clockwise outlines negative area. Lattice polygons with
        axis-aligned sides always have an integer area.

        Returns:
            Signed area in cells
        """
        n = len(self.points)
        if n < 3:
            return 0

        twice_area = 0
        for i in range(n):
            j = (i + 1) % n
            twice_area += self.points[i].x * self.points[j].y
            twice_area -= self.points[j].x * self.points[i].y

        return twice_area // 2

    @property
    def direction(self) -> WindingDirection:
        """Winding direction derived from the signed area."""
        if self.signed_area() > 0:
            return WindingDirection.CLOCKWISE
        return WindingDirection.COUNTER_CLOCKWISE

    @property
    def is_hole(self) -> bool:
        """True for the inner boundary of a light region enclosed by dark cells."""
        return self.direction == WindingDirection.COUNTER_CLOCKWISE

    def bounding_box(self) -> tuple[int, int, int, int]:
        """Calculate bounding box of the outline.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        return (min(xs), min(ys), max(xs), max(ys))

    def to_tuples(self) -> list[tuple[int, int]]:
        """Convert to a list of (x, y) tuples."""
        return [p.to_tuple() for p in self.points]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary representation of the outline
        """
        return {"points": [p.to_dict() for p in self.points]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Outline":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of an outline

        Returns:
            Outline instance
        """
        return cls(points=tuple(Point.from_dict(p) for p in data["points"]))
