"""Core tracing algorithms for rasterpath.

This module contains the pipeline that turns a grid into outlines:

- Edge emission (unit boundary edges around dark cells)
- Path merging (edges fused into closed loops by shared endpoint)
- Simplification (collinear runs reduced to corner vertices)
- Coverage checking (nonzero rasterization of outlines)
- Batch processing (independent grids traced in worker processes)

Key functions:
- trace_outlines: Trace the dark cells of a width x height lookup
- trace_grid: Trace a Grid
- iter_boundary_edges: Yield the boundary edges of a grid
- simplify_loop: Reduce a closed chain to its corners
- rasterize_outlines: Fill outlines with the nonzero rule
- verify_coverage: Check outlines against their source grid

Key classes:
- OutlineTracer: Configurable single-grid pipeline
- PathMerger: Incremental edge-to-loop assembler
- BatchTracer: Parallel tracing of named grids
"""

from rasterpath.core.coverage import rasterize_outlines, verify_coverage, winding_numbers
from rasterpath.core.emitter import Side, iter_boundary_edges
from rasterpath.core.geometry import Turn, classify_turn, cross_product, is_collinear, signed_area
from rasterpath.core.merger import Path, PathIndex, PathMerger
from rasterpath.core.processor import BatchResult, BatchTracer, process_grid
from rasterpath.core.simplifier import simplify_loop
from rasterpath.core.tracer import OutlineTracer, trace_grid, trace_outlines

__all__ = [
    # Processor classes
    "BatchResult",
    "BatchTracer",
    # Tracer classes
    "OutlineTracer",
    # Merger classes
    "Path",
    "PathIndex",
    "PathMerger",
    # Geometry
    "Side",
    "Turn",
    "classify_turn",
    "cross_product",
    "is_collinear",
    # Pipeline functions
    "iter_boundary_edges",
    "process_grid",
    "rasterize_outlines",
    "signed_area",
    "simplify_loop",
    "trace_grid",
    "trace_outlines",
    "verify_coverage",
    "winding_numbers",
]
