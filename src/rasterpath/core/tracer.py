"""Outline tracing pipeline.

Composes the three stages for one grid:
1. iter_boundary_edges: unit edges around every dark cell
2. PathMerger: edges fused into closed loops
3. simplify_loop: loops reduced to their corner vertices
"""

import logging
from collections.abc import Callable

from rasterpath.config import TracingConfig
from rasterpath.core.coverage import verify_coverage
from rasterpath.core.emitter import iter_boundary_edges
from rasterpath.core.merger import PathMerger
from rasterpath.core.simplifier import simplify_loop
from rasterpath.domain import Grid, Outline, Point

logger = logging.getLogger(__name__)


def _corner_key(point: Point) -> tuple[int, int]:
    return (point.y, point.x)


def _rotate_to_corner(points: list[Point]) -> list[Point]:
    """Rotate a polygon so it starts at its top-left vertex."""
    first = min(range(len(points)), key=lambda i: _corner_key(points[i]))
    return points[first:] + points[:first]


class OutlineTracer:
    """Traces the dark region of a grid into closed outlines.

    Example:
        tracer = OutlineTracer()
        outlines = tracer.trace(Grid.from_rows([[1, 1], [1, 0]]))
    """

    def __init__(self, config: TracingConfig | None = None) -> None:
        """Initialize tracer.

        Args:
            config: Tracing configuration (defaults if None)
        """
        self.config = config or TracingConfig()

    def trace(self, grid: Grid) -> list[Outline]:
        """Trace a grid.

        Args:
            grid: Raster to trace

        Returns:
            Outlines: clockwise for outer boundaries, counter-clockwise for
            holes. Empty if the grid has no dark cells.

        Raises:
            TracingError: On any internal consistency violation
        """
        merger = PathMerger()
        merger.add_edges(iter_boundary_edges(grid))

        polygons = [simplify_loop(loop) for loop in merger.closed_loops()]
        if self.config.canonical_order:
            polygons = sorted(
                (_rotate_to_corner(points) for points in polygons),
                key=lambda points: _corner_key(points[0]),
            )
        outlines = [Outline(points=tuple(points)) for points in polygons]

        if self.config.verify_coverage:
            verify_coverage(grid, outlines)

        logger.debug(
            "Traced %dx%d grid: %d edges, %d outlines",
            grid.width,
            grid.height,
            merger.edge_count,
            len(outlines),
        )
        return outlines


def trace_grid(grid: Grid, config: TracingConfig | None = None) -> list[Outline]:
    """Trace a grid with an optional configuration.

    Args:
        grid: Raster to trace
        config: Tracing configuration (defaults if None)

    Returns:
        Traced outlines
    """
    return OutlineTracer(config).trace(grid)


def trace_outlines(
    width: int,
    height: int,
    is_dark: Callable[[int, int], object],
) -> list[Outline]:
    """Trace the dark cells described by a lookup function.

    Args:
        width: Number of columns, positive
        height: Number of rows, positive
        is_dark: Callable (x, y) -> truthy for dark cells; called once per
            cell, never out of range. Its exceptions propagate.

    Returns:
        Closed outlines whose nonzero fill is exactly the dark region.
        Points lie in [0, width] x [0, height].

    Raises:
        GridDimensionError: If width or height is not positive
    """
    return trace_grid(Grid.from_predicate(width, height, is_dark))
