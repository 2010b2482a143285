"""Unit tests for collinear loop simplification."""

import pytest

from rasterpath.core.simplifier import simplify_loop
from rasterpath.domain import Point
from rasterpath.exceptions import DegenerateLoopError


def _points(*coords: tuple[int, int]) -> list[Point]:
    return [Point(x, y) for x, y in coords]


class TestSimplifyLoop:
    """Tests for simplify_loop."""

    def test_unit_square_unchanged(self):
        """A closed unit square only loses its repeated closing point."""
        loop = _points((0, 1), (0, 0), (1, 0), (1, 1), (0, 1))

        assert simplify_loop(loop) == _points((0, 1), (0, 0), (1, 0), (1, 1))

    def test_collinear_run_collapsed(self):
        """Points along a straight side are removed."""
        loop = _points((0, 0), (1, 0), (2, 0), (3, 0), (3, 1), (2, 1), (1, 1), (0, 1), (0, 0))

        assert simplify_loop(loop) == _points((0, 0), (3, 0), (3, 1), (0, 1))

    def test_seam_inside_straight_run(self):
        """A loop starting mid-side does not keep its start as a vertex."""
        loop = _points((1, 0), (2, 0), (2, 1), (1, 1), (0, 1), (0, 0), (1, 0))

        assert simplify_loop(loop) == _points((2, 0), (2, 1), (0, 1), (0, 0))

    def test_closing_point_optional(self):
        """An open-ended listing of the same polygon gives the same result."""
        closed = _points((0, 1), (0, 0), (2, 0), (2, 1), (0, 1))

        assert simplify_loop(closed) == simplify_loop(closed[:-1])

    def test_extra_collinear_points_do_not_matter(self):
        """Inserting collinear vertices along a side never changes the output."""
        base = _points((0, 2), (0, 0), (4, 0), (4, 2), (0, 2))
        dense = _points(
            (0, 2), (0, 1), (0, 0), (1, 0), (2, 0), (3, 0), (4, 0),
            (4, 1), (4, 2), (3, 2), (2, 2), (1, 2), (0, 2),
        )

        assert simplify_loop(dense) == simplify_loop(base)

    def test_no_collinear_triples_remain(self):
        """Every cyclic triple of the result turns."""
        loop = _points(
            (0, 1), (0, 0), (1, 0), (2, 0), (2, 1), (2, 2), (1, 2),
            (1, 3), (0, 3), (0, 2), (0, 1),
        )
        result = simplify_loop(loop)
        n = len(result)

        for i in range(n):
            a, b, c = result[i - 1], result[i], result[(i + 1) % n]
            cross = (a.x - b.x) * (c.y - b.y) - (a.y - b.y) * (c.x - b.x)
            assert cross != 0

    def test_degenerate_loop_rejected(self):
        """A loop that collapses below three vertices is an error."""
        with pytest.raises(DegenerateLoopError):
            simplify_loop(_points((0, 0), (1, 0), (2, 0), (0, 0)))
