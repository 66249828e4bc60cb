"""Tests for boundary parsing and containment."""

import pytest
from shapely.geometry import MultiPolygon, Polygon

from zoning_lookup.geometry import contains, parse_geojson_boundary
from zoning_lookup.models import Point

from conftest import RT1_RING, square


def polygon(*rings):
    return parse_geojson_boundary({"type": "Polygon", "coordinates": list(rings)})


class TestParseGeojsonBoundary:
    """Tests for parse_geojson_boundary function."""

    def test_parse_polygon(self):
        """Test parsing a simple GeoJSON polygon."""
        shape = polygon(RT1_RING)

        assert isinstance(shape, Polygon)
        assert not shape.is_empty
        assert len(shape.interiors) == 0

    def test_parse_polygon_with_hole(self):
        """Test that hole rings become polygon interiors."""
        shape = polygon(square(0, 0, 10, 10), square(4, 4, 6, 6))

        assert len(shape.interiors) == 1

    def test_parse_multipolygon(self):
        """Test parsing a GeoJSON multipolygon."""
        shape = parse_geojson_boundary(
            {
                "type": "MultiPolygon",
                "coordinates": [[square(0, 0, 1, 1)], [square(5, 5, 6, 6)]],
            }
        )

        assert isinstance(shape, MultiPolygon)
        assert len(shape.geoms) == 2

    def test_unclosed_ring_is_closed(self):
        """Test that a ring missing its closing point is still usable."""
        shape = polygon(square(0, 0, 10, 10)[:-1])

        assert contains(Point(5, 5), shape)

    def test_unsupported_geometry_type(self):
        """Test that non-polygon geometries are rejected."""
        with pytest.raises(ValueError, match="Unsupported geometry type"):
            parse_geojson_boundary({"type": "Point", "coordinates": [-123.12, 49.28]})

    def test_missing_coordinates(self):
        """Test that a geometry without coordinates is rejected."""
        with pytest.raises(ValueError, match="no coordinates"):
            parse_geojson_boundary({"type": "Polygon"})

    def test_malformed_positions(self):
        """Test that non-numeric positions are rejected."""
        with pytest.raises(ValueError, match="Malformed ring position"):
            polygon([["a", "b"], [1, 1], [2, 2], ["a", "b"]])

    def test_not_a_dict(self):
        """Test that non-object geometry is rejected."""
        with pytest.raises(ValueError):
            parse_geojson_boundary(["Polygon"])

    def test_degenerate_outer_ring_is_empty(self):
        """Test that a ring with fewer than 3 distinct points yields an empty shape."""
        shape = polygon([[0, 0], [1, 1], [0, 0]])

        assert shape.is_empty

    def test_collinear_outer_ring_is_empty(self):
        """Test that a zero-area ring yields an empty shape."""
        shape = polygon([[0, 0], [1, 1], [2, 2], [0, 0]])

        assert shape.is_empty

    def test_degenerate_hole_is_dropped(self):
        """Test that a degenerate hole is ignored rather than failing."""
        shape = polygon(square(0, 0, 10, 10), [[5, 5], [5, 5]])

        assert len(shape.interiors) == 0
        assert contains(Point(5, 5), shape)


class TestContains:
    """Tests for contains function."""

    def test_point_inside_rectangle(self):
        """Test a point strictly inside a rectangle."""
        assert contains(Point(-123.12, 49.28), polygon(RT1_RING)) is True

    def test_point_outside_rectangle(self):
        """Test a point strictly outside a rectangle."""
        assert contains(Point(-123.00, 49.28), polygon(RT1_RING)) is False

    def test_point_in_hole(self):
        """Test that a point inside a hole is outside the polygon."""
        shape = polygon(square(0, 0, 10, 10), square(4, 4, 6, 6))

        assert contains(Point(5, 5), shape) is False
        assert contains(Point(1, 1), shape) is True

    def test_multipolygon_any_member(self):
        """Test that a point inside any member polygon is contained."""
        shape = parse_geojson_boundary(
            {
                "type": "MultiPolygon",
                "coordinates": [[square(0, 0, 1, 1)], [square(5, 5, 6, 6)]],
            }
        )

        assert contains(Point(0.5, 0.5), shape) is True
        assert contains(Point(5.5, 5.5), shape) is True
        assert contains(Point(3, 3), shape) is False

    def test_point_on_edge_is_inside(self):
        """Test that points on an edge count as inside."""
        assert contains(Point(-123.11, 49.28), polygon(RT1_RING)) is True

    def test_point_on_vertex_is_inside(self):
        """Test that points on a vertex count as inside."""
        assert contains(Point(-123.13, 49.27), polygon(RT1_RING)) is True

    def test_point_on_hole_edge_is_inside(self):
        """Test that the hole boundary is part of the polygon."""
        shape = polygon(square(0, 0, 10, 10), square(4, 4, 6, 6))

        assert contains(Point(4, 5), shape) is True

    def test_empty_shapes_contain_nothing(self):
        """Test that empty polygons and multipolygons never contain a point."""
        assert contains(Point(0, 0), Polygon()) is False
        assert contains(Point(0, 0), MultiPolygon()) is False
        assert contains(Point(0.5, 0.5), polygon([[0, 0], [1, 1], [0, 0]])) is False

    def test_zero_area_polygon_contains_nothing(self):
        """Test that a collapsed polygon built directly rejects points on its edge."""
        flat = Polygon([(0, 0), (1, 0), (2, 0), (0, 0)])

        assert contains(Point(1, 0), flat) is False
        assert contains(Point(0, 0), flat) is False

    def test_zero_area_multipolygon_member_contains_nothing(self):
        """Test that only members with area can contain a point."""
        shape = MultiPolygon(
            [
                Polygon([(0, 0), (1, 0), (2, 0), (0, 0)]),
                Polygon([(5, 5), (6, 5), (6, 6), (5, 6), (5, 5)]),
            ]
        )

        assert contains(Point(1, 0), shape) is False
        assert contains(Point(5.5, 5.5), shape) is True
