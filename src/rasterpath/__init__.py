"""rasterpath - Trace binary rasters into closed polygon outlines.

rasterpath converts a rectangular grid of dark/light cells (a QR code bitmap or
any 0/1 matrix) into the minimal set of closed polygons whose nonzero fill is
exactly the dark region. Outer boundaries wind clockwise and holes
counter-clockwise in the y-down raster frame; the polygons are ready to be
turned into SVG path data, PostScript or canvas fills by the caller.

Example:
    >>> from rasterpath import trace_outlines
    >>> cells = {(0, 0), (1, 0)}
    >>> [o.to_tuples() for o in trace_outlines(2, 1, lambda x, y: (x, y) in cells)]
    [[(0, 0), (2, 0), (2, 1), (0, 1)]]
"""

from rasterpath.core.tracer import OutlineTracer, trace_grid, trace_outlines
from rasterpath.domain import Grid, Outline, Point, WindingDirection

__version__ = "0.1.0"

__all__ = [
    "Grid",
    "Outline",
    "OutlineTracer",
    "Point",
    "WindingDirection",
    "__version__",
    "trace_grid",
    "trace_outlines",
]
