"""Boundary parsing and point-in-polygon containment.

Provider GeoJSON is converted into shapely ``Polygon``/``MultiPolygon``
objects here, so nothing downstream handles raw coordinate lists.

Containment is boundary-inclusive: a point lying exactly on any ring edge or
vertex (outer ring or hole) is treated as inside the polygon. Cadastral
boundaries make on-edge queries plausible, and this matches what the
open-data variant of the service always returned.
"""

from typing import Any, Optional, Sequence

from loguru import logger
from shapely.errors import GEOSException
from shapely.geometry import MultiPolygon, Polygon
from shapely.geometry import Point as ShapelyPoint

from zoning_lookup.models import Boundary, Point

Coordinates = list[tuple[float, float]]


def _ring(raw: Sequence[Any]) -> Optional[Coordinates]:
    """Validate one ring of ``[x, y]`` pairs.

    Returns None for degenerate rings (fewer than 3 distinct points).

    Raises:
        ValueError: If the ring is not a sequence of numeric pairs
    """
    if not isinstance(raw, (list, tuple)):
        raise ValueError(f"Ring must be a list of positions, got {type(raw).__name__}")
    try:
        coords = [(float(position[0]), float(position[1])) for position in raw]
    except (TypeError, IndexError, ValueError) as e:
        raise ValueError(f"Malformed ring position: {e}") from e

    if len(set(coords)) < 3:
        return None
    return coords


def _polygon(rings: Sequence[Any]) -> Polygon:
    if not isinstance(rings, (list, tuple)):
        raise ValueError("Polygon coordinates must be a list of rings")
    if not rings:
        return Polygon()

    outer = _ring(rings[0])
    if outer is None or Polygon(outer).area == 0:
        return Polygon()

    holes = [hole for hole in (_ring(r) for r in rings[1:]) if hole is not None]
    return Polygon(outer, holes)


def parse_geojson_boundary(geometry: dict[str, Any]) -> Boundary:
    """Convert a GeoJSON Polygon or MultiPolygon dict into a shapely shape.

    Degenerate outer rings produce an empty polygon (which contains nothing);
    degenerate holes are dropped.

    Args:
        geometry: GeoJSON geometry object

    Returns:
        Polygon or MultiPolygon

    Raises:
        ValueError: On unsupported geometry types or malformed coordinates
    """
    if not isinstance(geometry, dict):
        raise ValueError("Geometry must be a GeoJSON object")

    geom_type = geometry.get("type")
    coordinates = geometry.get("coordinates")
    if coordinates is None:
        raise ValueError("Geometry has no coordinates")

    if geom_type == "Polygon":
        return _polygon(coordinates)

    if geom_type == "MultiPolygon":
        if not isinstance(coordinates, (list, tuple)):
            raise ValueError("MultiPolygon coordinates must be a list of polygons")
        parts = [p for p in (_polygon(c) for c in coordinates) if not p.is_empty]
        return MultiPolygon(parts)

    raise ValueError(f"Unsupported geometry type: {geom_type}")


def contains(point: Point, shape: Boundary) -> bool:
    """Whether ``point`` lies inside ``shape``.

    Polygon: inside the outer ring and not inside any hole. MultiPolygon: inside
    any member polygon. Points on an edge count as inside. Empty or degenerate
    shapes contain nothing.
    """
    if isinstance(shape, MultiPolygon):
        return any(contains(point, member) for member in shape.geoms)

    # Zero-area polygons still "cover" points on their collapsed edge
    if shape.is_empty or shape.area == 0:
        return False

    try:
        return bool(shape.covers(ShapelyPoint(point.longitude, point.latitude)))
    except GEOSException as e:
        logger.debug("Containment test failed on malformed polygon: {}", e)
        return False
