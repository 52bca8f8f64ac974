"""
Single-part geometries: points, linestrings and polygons
"""

__all__ = ['GeoLineString', 'GeoPoint', 'GeoPolygon']

from typing import Any, Dict, List, Sequence

from wktsketch._base import (
    SingleShapeBase, _coords_from_geo_interface, _geometry_from_geo_interface
)
from wktsketch.coordinates import Coordinate
from wktsketch.wkt import parse_coordinate, parse_coordinate_list, parse_ring_list


def _check_geo_interface_type(geom: Dict[str, Any], expected: str):
    if not geom.get('type') == expected:
        raise ValueError(
            f'Geometry represents a {geom.get("type")}; expected {expected}.'
        )


class GeoPoint(SingleShapeBase):

    """
    A single position.

    Args:
        coordinate: (Coordinate)
            The point's location
    """

    geometry_type = 'Point'

    def __init__(self, coordinate: Coordinate):
        super().__init__()
        self.coordinate = coordinate

    def __eq__(self, other) -> bool:
        if not isinstance(other, GeoPoint):
            return False

        return self.coordinate == other.coordinate

    def __hash__(self) -> int:
        return hash((self.geometry_type, self.coordinate))

    def __repr__(self):
        return f'<GeoPoint at {self.coordinate.to_float()}>'

    @property
    def __geo_interface__(self):
        return {
            'type': 'Point',
            'coordinates': list(self.coordinate.to_float()),
        }

    @property
    def coordinates(self) -> List[Coordinate]:
        return [self.coordinate]

    def copy(self) -> 'GeoPoint':
        return GeoPoint(self.coordinate)

    @classmethod
    def from_geojson(cls, gjson: Dict[str, Any]) -> 'GeoPoint':
        """
        Creates a GeoPoint from a GeoJSON point geometry (or a Feature
        wrapping one).
        """
        geom = _geometry_from_geo_interface(gjson)
        _check_geo_interface_type(geom, 'Point')
        return GeoPoint(Coordinate(*geom['coordinates'][:2]))

    @classmethod
    def _from_wkt_body(cls, body: str) -> 'GeoPoint':
        return GeoPoint(parse_coordinate(body))

    def _to_shapely(self):
        import shapely  # pylint: disable=import-outside-toplevel
        return shapely.Point(self.coordinate.x, self.coordinate.y)

    def to_wkt(self) -> str:
        return f'POINT ({self.coordinate.to_wkt()})'


class GeoLineString(SingleShapeBase):

    """
    An ordered sequence of coordinates.

    Args:
        vertices: (List[Coordinate])
            The line's vertices, in order. At least one is required.
    """

    geometry_type = 'LineString'

    def __init__(self, vertices: Sequence[Coordinate]):
        super().__init__()
        if not vertices:
            raise ValueError('A LineString requires at least one vertex.')

        self.vertices = list(vertices)

    def __eq__(self, other) -> bool:
        if not isinstance(other, GeoLineString):
            return False

        return self.vertices == other.vertices

    def __hash__(self) -> int:
        return hash((self.geometry_type, tuple(self.vertices)))

    def __repr__(self):
        noun = 'vertex' if len(self.vertices) == 1 else 'vertices'
        return f'<GeoLineString with {len(self.vertices)} {noun}>'

    @property
    def __geo_interface__(self):
        return {
            'type': 'LineString',
            'coordinates': [list(x.to_float()) for x in self.vertices],
        }

    @property
    def coordinates(self) -> List[Coordinate]:
        return list(self.vertices)

    def copy(self) -> 'GeoLineString':
        return GeoLineString(self.vertices)

    @classmethod
    def from_geojson(cls, gjson: Dict[str, Any]) -> 'GeoLineString':
        """
        Creates a GeoLineString from a GeoJSON linestring geometry (or a
        Feature wrapping one).
        """
        geom = _geometry_from_geo_interface(gjson)
        _check_geo_interface_type(geom, 'LineString')
        return GeoLineString(_coords_from_geo_interface(geom.get('coordinates', [])))

    @classmethod
    def _from_wkt_body(cls, body: str) -> 'GeoLineString':
        return GeoLineString(parse_coordinate_list(body))

    def _to_shapely(self):
        import shapely  # pylint: disable=import-outside-toplevel
        return shapely.LineString([x.to_float() for x in self.vertices])

    def to_wkt(self) -> str:
        return f'LINESTRING {self._coords_to_wkt(self.vertices)}'


class GeoPolygon(SingleShapeBase):

    """
    A polygon, as expressed by one or more linear rings. The first ring is the
    outer boundary and any remaining rings are holes.

    Rings do not need to be closed; closure is added whenever the polygon is
    written out, and the stored rings are never modified.

    Args:
        rings: (List[List[Coordinate]])
            The outer boundary followed by any holes
    """

    geometry_type = 'Polygon'

    def __init__(self, rings: Sequence[Sequence[Coordinate]]):
        super().__init__()
        if not rings:
            raise ValueError('A Polygon requires at least one ring.')

        if not all(rings):
            raise ValueError('Polygon rings must contain at least one coordinate.')

        self.rings = [list(ring) for ring in rings]

    def __eq__(self, other) -> bool:
        if not isinstance(other, GeoPolygon):
            return False

        return self.rings == other.rings

    def __hash__(self) -> int:
        return hash((self.geometry_type, tuple(tuple(ring) for ring in self.rings)))

    def __repr__(self):
        pl = 's' if len(self.holes) != 1 else ''
        return f'<GeoPolygon of {len(self.outline)} vertices and {len(self.holes)} hole{pl}>'

    @property
    def __geo_interface__(self):
        return {
            'type': 'Polygon',
            'coordinates': [
                [list(coord.to_float()) for coord in ring]
                for ring in self.linear_rings()
            ]
        }

    @property
    def coordinates(self) -> List[Coordinate]:
        return [coord for ring in self.rings for coord in ring]

    @property
    def holes(self) -> List[List[Coordinate]]:
        return self.rings[1:]

    @property
    def outline(self) -> List[Coordinate]:
        return self.rings[0]

    def copy(self) -> 'GeoPolygon':
        return GeoPolygon(self.rings)

    @classmethod
    def from_geojson(cls, gjson: Dict[str, Any]) -> 'GeoPolygon':
        """
        Creates a GeoPolygon from a GeoJSON polygon geometry (or a Feature
        wrapping one).
        """
        geom = _geometry_from_geo_interface(gjson)
        _check_geo_interface_type(geom, 'Polygon')
        return GeoPolygon(
            [_coords_from_geo_interface(ring) for ring in geom.get('coordinates', [])]
        )

    @classmethod
    def _from_wkt_body(cls, body: str) -> 'GeoPolygon':
        return GeoPolygon(parse_ring_list(body))

    def linear_rings(self) -> List[List[Coordinate]]:
        """The polygon's rings, each closed (a copy; stored rings are untouched)"""
        return [self._closed(ring) for ring in self.rings]

    def _to_shapely(self):
        import shapely  # pylint: disable=import-outside-toplevel
        rings = [[x.to_float() for x in ring] for ring in self.linear_rings()]
        return shapely.Polygon(rings[0], holes=rings[1:])

    def to_wkt(self) -> str:
        rings_str = ', '.join(self._linear_ring_to_wkt(ring) for ring in self.rings)
        return f'POLYGON ({rings_str})'
