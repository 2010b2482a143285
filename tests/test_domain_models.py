"""Tests for domain models to verify they work correctly."""

import pytest

from rasterpath.domain import Edge, Grid, Outline, Point, WindingDirection
from rasterpath.exceptions import GridDataError, GridDimensionError, InvalidEdgeError


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(3, 4)
        assert p.x == 3
        assert p.y == 4

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert Point(3, 4).to_tuple() == (3, 4)

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = Point(7, 2)
        p2 = Point.from_dict(p1.to_dict())
        assert p2 == p1

    def test_point_equality_is_exact(self) -> None:
        """Points with equal coordinates are equal and hash alike."""
        assert Point(1, 2) == Point(1, 2)
        assert Point(1, 2) != Point(2, 1)
        assert len({Point(1, 2), Point(1, 2), Point(2, 1)}) == 2

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(1, 2)
        with pytest.raises(AttributeError):
            p.x = 5  # type: ignore


class TestEdge:
    """Tests for Edge class."""

    def test_edge_direction(self) -> None:
        """Direction is the unit step from start to end."""
        assert Edge(Point(0, 1), Point(0, 0)).direction == (0, -1)
        assert Edge(Point(1, 1), Point(0, 1)).direction == (-1, 0)

    @pytest.mark.parametrize(
        "start, end",
        [
            (Point(0, 0), Point(0, 0)),
            (Point(0, 0), Point(1, 1)),
            (Point(0, 0), Point(2, 0)),
        ],
    )
    def test_non_unit_edge_rejected(self, start: Point, end: Point) -> None:
        """Edges must join adjacent corners."""
        with pytest.raises(InvalidEdgeError):
            Edge(start, end)


class TestGrid:
    """Tests for Grid class."""

    def test_from_rows(self) -> None:
        """Rows map to (x, y) with x as column."""
        grid = Grid.from_rows([[1, 0, 0], [0, 0, 1]])
        assert (grid.width, grid.height) == (3, 2)
        assert grid.is_dark(0, 0)
        assert grid.is_dark(2, 1)
        assert not grid.is_dark(1, 0)

    def test_out_of_range_is_light(self) -> None:
        """Lookups outside the grid report light cells."""
        grid = Grid.from_rows([[1]])
        assert grid.is_dark(0, 0)
        for x, y in [(-1, 0), (0, -1), (1, 0), (0, 1), (5, 5)]:
            assert not grid.is_dark(x, y)

    def test_from_flat_non_square(self) -> None:
        """Flat data is split into rows of the given size."""
        grid = Grid.from_flat([1, 0, 1, 0, 1, 0], size=3)
        assert (grid.width, grid.height) == (3, 2)
        assert grid.to_rows() == [[True, False, True], [False, True, False]]

    def test_from_flat_rejects_partial_row(self) -> None:
        """Data length must be a multiple of the row size."""
        with pytest.raises(GridDataError):
            Grid.from_flat([1, 0, 1, 0], size=3)

    def test_from_predicate_samples_every_cell(self) -> None:
        """The lookup is called once per in-range cell."""
        calls: list[tuple[int, int]] = []

        def is_dark(x: int, y: int) -> bool:
            calls.append((x, y))
            return x == y

        grid = Grid.from_predicate(2, 3, is_dark)
        assert sorted(calls) == [(x, y) for x in range(2) for y in range(3)]
        assert grid.dark_count() == 2

    def test_from_predicate_propagates_errors(self) -> None:
        """Errors raised by the lookup reach the caller unchanged."""

        def is_dark(x: int, y: int) -> bool:
            raise KeyError((x, y))

        with pytest.raises(KeyError):
            Grid.from_predicate(2, 2, is_dark)

    @pytest.mark.parametrize("width, height", [(0, 3), (3, 0), (-1, 2), (2.5, 2), (True, 2)])
    def test_invalid_dimensions(self, width: object, height: object) -> None:
        """Width and height must be positive integers."""
        with pytest.raises(GridDimensionError):
            Grid.from_predicate(width, height, lambda x, y: True)  # type: ignore[arg-type]

    def test_ragged_rows_rejected(self) -> None:
        """All rows must have the same length."""
        with pytest.raises(GridDataError):
            Grid.from_rows([[1, 0], [1]])

    def test_empty_rows_rejected(self) -> None:
        """A grid needs at least one cell."""
        with pytest.raises(GridDimensionError):
            Grid.from_rows([])

    def test_cell_count_must_match(self) -> None:
        """Direct construction validates the cell tuple length."""
        with pytest.raises(GridDataError):
            Grid(width=2, height=2, cells=(True, False, True))

    def test_grid_serialization(self) -> None:
        """Test grid serialization and deserialization."""
        g1 = Grid.from_rows([[1, 0], [0, 1], [1, 1]])
        g2 = Grid.from_dict(g1.to_dict())
        assert g2 == g1


class TestOutline:
    """Tests for Outline class."""

    def test_clockwise_outline(self) -> None:
        """Clockwise in the y-down frame means positive area."""
        outline = Outline((Point(0, 0), Point(2, 0), Point(2, 3), Point(0, 3)))
        assert outline.signed_area() == 6
        assert outline.direction == WindingDirection.CLOCKWISE
        assert not outline.is_hole

    def test_counter_clockwise_outline_is_hole(self) -> None:
        """Counter-clockwise outlines are holes."""
        outline = Outline((Point(1, 1), Point(1, 2), Point(2, 2), Point(2, 1)))
        assert outline.signed_area() == -1
        assert outline.direction == WindingDirection.COUNTER_CLOCKWISE
        assert outline.is_hole

    def test_bounding_box(self) -> None:
        """Test bounding box calculation."""
        outline = Outline((Point(1, 2), Point(4, 2), Point(4, 5), Point(1, 5)))
        assert outline.bounding_box() == (1, 2, 4, 5)

    def test_sequence_protocol(self) -> None:
        """Outlines are sized and iterable over their points."""
        points = (Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1))
        outline = Outline(points)
        assert len(outline) == 4
        assert list(outline) == list(points)
        assert outline.to_tuples() == [(0, 0), (1, 0), (1, 1), (0, 1)]

    def test_outline_serialization(self) -> None:
        """Test outline serialization and deserialization."""
        o1 = Outline((Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)))
        o2 = Outline.from_dict(o1.to_dict())
        assert o2 == o1
