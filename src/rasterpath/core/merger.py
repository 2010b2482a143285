"""Incremental assembly of boundary edges into closed loops.

The PathMerger consumes unit edges one at a time and fuses them, by shared
endpoint, into growing open paths until every path closes.

Joining rule at a vertex v, between a segment arriving at v and one leaving it:

- Clockwise turns and straight continuations are joined immediately. At a
  checkerboard junction (two dark cells touching only at v) two edges arrive
  and two leave, but each arriving edge makes a clockwise turn with exactly
  one leaving edge, the one bounding the same cell. Picking it keeps the
  two cells on separate loops instead of producing a figure-eight.
- Counter-clockwise turns (concave corners) are only valid where exactly one
  edge arrives and one leaves. That can only be known once every edge has
  been seen, so those joins are deferred until closed_loops().

The final loop set does not depend on the order edges are added.
"""

import itertools
import logging
from collections.abc import Iterable

from rasterpath.core.geometry import Turn, classify_turn
from rasterpath.domain import Edge, Point
from rasterpath.exceptions import EdgeMergeError, EndpointCollisionError

logger = logging.getLogger(__name__)

# Two loops can share a vertex only at a checkerboard junction.
MAX_CLAIMS_PER_POINT = 2

_IMMEDIATE_TURNS = (Turn.CLOCKWISE, Turn.STRAIGHT)


class Path:
    """An open (or just-closed) chain of boundary points.

    Owns its point list exclusively; joins extend it in place.

    Attributes:
        path_id: Stable identifier used in diagnostics
        points: Chain of at least two points, consecutive ones one unit apart
    """

    __slots__ = ("path_id", "points")

    def __init__(self, path_id: int, points: list[Point]) -> None:
        self.path_id = path_id
        self.points = points

    def __repr__(self) -> str:
        return (
            f"Path(id={self.path_id}, start={self.start}, end={self.end}, "
            f"len={len(self.points)})"
        )

    @property
    def start(self) -> Point:
        return self.points[0]

    @property
    def end(self) -> Point:
        return self.points[-1]

    @property
    def first_direction(self) -> tuple[int, int]:
        a, b = self.points[0], self.points[1]
        return (b.x - a.x, b.y - a.y)

    @property
    def last_direction(self) -> tuple[int, int]:
        a, b = self.points[-2], self.points[-1]
        return (b.x - a.x, b.y - a.y)

    @property
    def is_closed(self) -> bool:
        return len(self.points) > 2 and self.start == self.end


class PathIndex:
    """Endpoint maps for the live paths of one merge.

    Invariant: every indexed path has exactly one entry in the start map,
    keyed by its current start, and one in the end map, keyed by its current
    end. Retired paths have none.
    """

    def __init__(self) -> None:
        self._starts: dict[Point, list[Path]] = {}
        self._ends: dict[Point, list[Path]] = {}
        self._live: dict[int, Path] = {}

    def __len__(self) -> int:
        return len(self._live)

    def __contains__(self, path: Path) -> bool:
        return path.path_id in self._live

    def add(self, path: Path) -> None:
        """Index a path under its current start and end.

        Raises:
            EndpointCollisionError: If a key already holds the maximum number
                of candidates
        """
        _claim(self._starts, path.start, path, "start")
        _claim(self._ends, path.end, path, "end")
        self._live[path.path_id] = path

    def remove(self, path: Path) -> None:
        """Drop a path from both maps."""
        _release(self._starts, path.start, path)
        _release(self._ends, path.end, path)
        del self._live[path.path_id]

    def starting_at(self, point: Point) -> list[Path]:
        """Paths whose start is point."""
        return list(self._starts.get(point, ()))

    def ending_at(self, point: Point) -> list[Path]:
        """Paths whose end is point."""
        return list(self._ends.get(point, ()))

    def open_ends(self) -> list[Point]:
        """Points where at least one live path ends."""
        return list(self._ends)

    def next_open_end(self) -> Point | None:
        """Any point where a live path ends, or None when all are retired."""
        return next(iter(self._ends), None)


def _claim(mapping: dict[Point, list[Path]], point: Point, path: Path, role: str) -> None:
    candidates = mapping.setdefault(point, [])
    if len(candidates) >= MAX_CLAIMS_PER_POINT:
        raise EndpointCollisionError(
            point,
            [c.path_id for c in candidates] + [path.path_id],
            f"more than {MAX_CLAIMS_PER_POINT} paths {role} here",
        )
    candidates.append(path)


def _release(mapping: dict[Point, list[Path]], point: Point, path: Path) -> None:
    candidates = mapping[point]
    candidates.remove(path)
    if not candidates:
        del mapping[point]


class PathMerger:
    """Fuses unit edges into closed loops.

    One instance per traced grid; all state is local to it.

    Example:
        merger = PathMerger()
        for edge in iter_boundary_edges(grid):
            merger.add_edge(edge)
        loops = merger.closed_loops()
    """

    def __init__(self) -> None:
        self._index = PathIndex()
        self._closed: list[Path] = []
        self._ids = itertools.count()
        self.edge_count = 0
        self.join_count = 0
        self.deferred_join_count = 0
        self.peak_open_paths = 0

    @property
    def open_path_count(self) -> int:
        """Number of paths still waiting for a partner."""
        return len(self._index)

    def add_edges(self, edges: Iterable[Edge]) -> None:
        """Add every edge from an iterable."""
        for edge in edges:
            self.add_edge(edge)

    def add_edge(self, edge: Edge) -> None:
        """Wrap an edge as a path and join it with any matching neighbours.

        Args:
            edge: Directed unit edge

        Raises:
            EdgeMergeError: If a join is attempted at mismatched endpoints
            EndpointCollisionError: If an endpoint is ambiguous
        """
        self.edge_count += 1
        path = Path(next(self._ids), [edge.start, edge.end])

        successor = self._find_successor(path)
        if successor is not None:
            self._index.remove(successor)
            path = self._join(path, successor)
            if self._close_if_complete(path):
                return

        predecessor = self._find_predecessor(path)
        if predecessor is not None:
            self._index.remove(predecessor)
            path = self._join(predecessor, path)
            if self._close_if_complete(path):
                return

        self._index.add(path)
        self.peak_open_paths = max(self.peak_open_paths, len(self._index))

    def closed_loops(self) -> list[list[Point]]:
        """Resolve deferred joins and return every closed loop.

        Each loop is returned as its raw point chain, the last point
        repeating the first.

        Returns:
            List of closed point chains

        Raises:
            EndpointCollisionError: If an open endpoint cannot be paired
        """
        self._resolve_deferred()
        logger.debug(
            "Merged %d edges into %d loops (%d joins, %d deferred, peak %d open)",
            self.edge_count,
            len(self._closed),
            self.join_count,
            self.deferred_join_count,
            self.peak_open_paths,
        )
        return [list(path.points) for path in self._closed]

    def _find_successor(self, path: Path) -> Path | None:
        """Find the path that continues from path's end without turning left."""
        matches = [
            candidate
            for candidate in self._index.starting_at(path.end)
            if classify_turn(path.last_direction, candidate.first_direction)
            in _IMMEDIATE_TURNS
        ]
        return self._single(path.end, matches)

    def _find_predecessor(self, path: Path) -> Path | None:
        """Find the path that leads into path's start without turning left."""
        matches = [
            candidate
            for candidate in self._index.ending_at(path.start)
            if classify_turn(candidate.last_direction, path.first_direction)
            in _IMMEDIATE_TURNS
        ]
        return self._single(path.start, matches)

    @staticmethod
    def _single(point: Point, matches: list[Path]) -> Path | None:
        if len(matches) > 1:
            raise EndpointCollisionError(
                point,
                [m.path_id for m in matches],
                "several paths join here with the same turn",
            )
        return matches[0] if matches else None

    def _join(self, head: Path, tail: Path) -> Path:
        """Append tail to head, sharing head's end point.

        Raises:
            EdgeMergeError: If head does not end where tail starts
        """
        if head.end != tail.start:
            raise EdgeMergeError(head.end, tail.start, head.path_id, tail.path_id)
        head.points.extend(tail.points[1:])
        self.join_count += 1
        return head

    def _close_if_complete(self, path: Path) -> bool:
        """Move path to the finished set if its closing turn can be taken now."""
        if not path.is_closed:
            return False
        if classify_turn(path.last_direction, path.first_direction) not in _IMMEDIATE_TURNS:
            return False
        self._closed.append(path)
        return True

    def _resolve_deferred(self) -> None:
        """Join the remaining open paths across concave corners.

        After all edges are in, every remaining open endpoint is a vertex
        with exactly one arriving and one leaving edge.
        """
        while (point := self._index.next_open_end()) is not None:
            heads = self._index.ending_at(point)
            tails = self._index.starting_at(point)
            if len(heads) != 1 or len(tails) != 1:
                raise EndpointCollisionError(
                    point,
                    [p.path_id for p in heads + tails],
                    f"{len(heads)} open ends and {len(tails)} open starts left",
                )
            head, tail = heads[0], tails[0]
            self.deferred_join_count += 1
            if head is tail:
                self._index.remove(head)
                self._closed.append(head)
                continue
            self._index.remove(head)
            self._index.remove(tail)
            self._index.add(self._join(head, tail))
