"""Binary raster representation.

This module defines the grid domain model, the read-only input to the
tracing pipeline: a rectangle of dark/light cells stored row-major.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from rasterpath.exceptions import GridDataError, GridDimensionError


def _is_positive_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


@dataclass(frozen=True)
class Grid:
    """An immutable width x height raster of dark/light cells.

    Attributes:
        width: Number of columns
        height: Number of rows
        cells: Row-major cell values, True for dark

    Raises:
        GridDimensionError: If width or height is not a positive integer
        GridDataError: If the number of cells does not match the dimensions
    """

    width: int
    height: int
    cells: tuple[bool, ...]

    def __post_init__(self) -> None:
        if not (_is_positive_int(self.width) and _is_positive_int(self.height)):
            raise GridDimensionError(self.width, self.height)
        if len(self.cells) != self.width * self.height:
            raise GridDataError(
                f"expected {self.width * self.height} cells for "
                f"{self.width}x{self.height}, got {len(self.cells)}"
            )

    def is_dark(self, x: int, y: int) -> bool:
        """Check whether cell (x, y) is dark.

        Coordinates outside the grid are light, so callers can probe
        neighbours across the border without bounds checks.

        Args:
            x: Column index
            y: Row index

        Returns:
            True if the cell exists and is dark
        """
        if 0 <= x < self.width and 0 <= y < self.height:
            return self.cells[y * self.width + x]
        return False

    def dark_count(self) -> int:
        """Count dark cells."""
        return sum(self.cells)

    def to_rows(self) -> list[list[bool]]:
        """Return the cells as a list of rows."""
        return [
            list(self.cells[y * self.width:(y + 1) * self.width])
            for y in range(self.height)
        ]

    @classmethod
    def from_predicate(
        cls,
        width: int,
        height: int,
        is_dark: Callable[[int, int], object],
    ) -> "Grid":
        """Build a grid by sampling a lookup once per cell.

        Exceptions raised by the lookup propagate to the caller.

        Args:
            width: Number of columns
            height: Number of rows
            is_dark: Callable (x, y) -> truthy for dark cells

        Returns:
            Grid instance
        """
        if not (_is_positive_int(width) and _is_positive_int(height)):
            raise GridDimensionError(width, height)
        cells = tuple(
            bool(is_dark(x, y)) for y in range(height) for x in range(width)
        )
        return cls(width=width, height=height, cells=cells)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[object]]) -> "Grid":
        """Build a grid from a sequence of equal-length rows.

        Args:
            rows: Rows of truthy (dark) / falsy (light) values

        Returns:
            Grid instance
        """
        if not rows or not rows[0]:
            raise GridDimensionError(len(rows[0]) if rows else 0, len(rows))
        width = len(rows[0])
        for index, row in enumerate(rows):
            if len(row) != width:
                raise GridDataError(
                    f"row {index} has {len(row)} cells, expected {width}"
                )
        cells = tuple(bool(value) for row in rows for value in row)
        return cls(width=width, height=len(rows), cells=cells)

    @classmethod
    def from_flat(cls, data: Sequence[object], size: int) -> "Grid":
        """Build a grid from a flat row-major sequence.

        This is the {data, size} layout QR encoders hand out, where size is
        the number of cells per row and need not equal the row count.

        Args:
            data: Flat cell values, length a positive multiple of size
            size: Cells per row

        Returns:
            Grid instance
        """
        if not _is_positive_int(size):
            raise GridDimensionError(size, len(data))
        if not data or len(data) % size:
            raise GridDataError(
                f"{len(data)} cells cannot be split into rows of {size}"
            )
        return cls(
            width=size,
            height=len(data) // size,
            cells=tuple(bool(value) for value in data),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary with width, height and 0/1 cell data
        """
        return {
            "width": self.width,
            "height": self.height,
            "data": [int(value) for value in self.cells],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Grid":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a grid

        Returns:
            Grid instance
        """
        return cls(
            width=data["width"],
            height=data["height"],
            cells=tuple(bool(value) for value in data["data"]),
        )
