"""Exception hierarchy for rasterpath."""


class RasterPathError(Exception):
    """Base exception for all rasterpath errors."""

    pass


class GridError(RasterPathError):
    """Errors related to the input raster."""

    pass


class GridDimensionError(GridError):
    """Grid width or height is not a positive integer."""

    def __init__(self, width: object, height: object) -> None:
        self.width = width
        self.height = height
        super().__init__(
            f"Grid dimensions must be positive integers, got {width!r} x {height!r}"
        )


class GridDataError(GridError):
    """Cell data does not describe a rectangular grid."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid grid data: {reason}")


class GeometryError(RasterPathError):
    """Errors in geometric primitives."""

    pass


class InvalidEdgeError(GeometryError):
    """Edge endpoints are not one unit apart on the grid."""

    def __init__(self, start: object, end: object) -> None:
        self.start = start
        self.end = end
        super().__init__(f"Edge {start} -> {end} is not a unit grid segment")


class TracingError(RasterPathError):
    """Internal consistency violation while tracing outlines.

    These indicate a disagreement between the edge emitter and the path
    merger, never a recoverable input problem.
    """

    pass


class EdgeMergeError(TracingError):
    """Two paths were joined at endpoints that do not coincide."""

    def __init__(
        self,
        head_end: object,
        tail_start: object,
        head_id: int,
        tail_id: int,
    ) -> None:
        self.head_end = head_end
        self.tail_start = tail_start
        self.head_id = head_id
        self.tail_id = tail_id
        super().__init__(
            f"Cannot join path {head_id} ending at {head_end} "
            f"to path {tail_id} starting at {tail_start}"
        )


class EndpointCollisionError(TracingError):
    """An endpoint key has candidates that cannot be disambiguated."""

    def __init__(self, point: object, path_ids: list[int], reason: str) -> None:
        self.point = point
        self.path_ids = path_ids
        self.reason = reason
        super().__init__(
            f"Endpoint collision at {point} between paths {path_ids}: {reason}"
        )


class DegenerateLoopError(TracingError):
    """A closed loop collapsed to fewer than three vertices."""

    def __init__(self, points: list[object]) -> None:
        self.points = points
        super().__init__(
            f"Closed loop degenerated to {len(points)} vertices: {points}"
        )


class CoverageMismatchError(TracingError):
    """Rasterized outlines do not reproduce the source grid."""

    def __init__(self, cells: list[tuple[int, int]]) -> None:
        self.cells = cells
        preview = ", ".join(str(c) for c in cells[:10])
        more = f" (+{len(cells) - 10} more)" if len(cells) > 10 else ""
        super().__init__(
            f"Outlines disagree with the grid at {len(cells)} cells: {preview}{more}"
        )
