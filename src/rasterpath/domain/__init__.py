"""Domain models for rasterpath.

This module contains the core domain models representing the input raster and
the traced outlines. All models are designed to be:

- Immutable (frozen dataclasses)
- Serializable for inter-process communication (parallel processing)
- Free of any rendering or output-format concerns

Key classes:
- Grid: The binary raster being traced
- Point: An integer grid corner
- Edge: A directed unit boundary segment
- Outline: A closed, simplified boundary loop
"""

from rasterpath.domain.grid import Grid
from rasterpath.domain.outline import Edge, Outline, Point, WindingDirection

__all__: list[str] = [
    # Enums
    "WindingDirection",
    # Core types
    "Point",
    "Edge",
    "Outline",
    "Grid",
]
