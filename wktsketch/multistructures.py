"""
Multi-part geometries: multipoints, multilinestrings and multipolygons
"""

__all__ = ['MultiGeoLineString', 'MultiGeoPoint', 'MultiGeoPolygon']

from typing import Any, Dict, List, Sequence

from wktsketch._base import (
    BaseShape, MultiShapeBase, _coords_from_geo_interface, _geometry_from_geo_interface
)
from wktsketch.structures import GeoLineString, GeoPoint, GeoPolygon
from wktsketch.coordinates import Coordinate
from wktsketch.wkt import parse_multipoint_body, parse_polygon_group_list, parse_ring_list


class MultiGeoLineString(MultiShapeBase):

    """
    One or more linestrings drawn as a single shape.

    A MultiGeoLineString holding exactly one part is written out as a plain
    LINESTRING.
    """

    geometry_type = 'MultiLineString'

    def __init__(self, geoshapes: Sequence[GeoLineString]):
        super().__init__()
        if not geoshapes:
            raise ValueError('A MultiLineString requires at least one linestring.')

        self.geoshapes: List[GeoLineString] = list(geoshapes)

    def __repr__(self):
        pl = 's' if len(self.geoshapes) != 1 else ''
        return f'<MultiGeoLineString of {len(self.geoshapes)} linestring{pl}>'

    @classmethod
    def from_geojson(cls, gjson: Dict[str, Any]) -> 'MultiGeoLineString':
        geom = _geometry_from_geo_interface(gjson)
        if not geom.get('type') == 'MultiLineString':
            raise ValueError(
                f'Geometry represents a {geom.get("type")}; expected MultiLineString.'
            )

        return MultiGeoLineString([
            GeoLineString(_coords_from_geo_interface(line))
            for line in geom.get('coordinates', [])
        ])

    @classmethod
    def _from_wkt_body(cls, body: str) -> 'MultiGeoLineString':
        return MultiGeoLineString([GeoLineString(line) for line in parse_ring_list(body)])

    def split(self) -> List[BaseShape]:
        # Drawn as one multi-part line, not as separate lines
        return [self]

    def _to_shapely(self):
        import shapely  # pylint: disable=import-outside-toplevel
        return shapely.MultiLineString(
            [[x.to_float() for x in line.vertices] for line in self.geoshapes]
        )

    def to_wkt(self) -> str:
        """
        Converts the shape to its WKT string representation. The envelope is
        chosen from the number of parts: a single part is written as a
        LINESTRING.

        Returns:
            str
        """
        if len(self.geoshapes) == 1:
            return self.geoshapes[0].to_wkt()

        lines = ', '.join(self._coords_to_wkt(shape.vertices) for shape in self.geoshapes)
        return f'MULTILINESTRING ({lines})'


class MultiGeoPoint(MultiShapeBase):

    geometry_type = 'MultiPoint'

    def __init__(self, geoshapes: Sequence[GeoPoint]):
        super().__init__()
        if not geoshapes:
            raise ValueError('A MultiPoint requires at least one point.')

        self.geoshapes: List[GeoPoint] = list(geoshapes)

    def __repr__(self):
        pl = 's' if len(self.geoshapes) != 1 else ''
        return f'<MultiGeoPoint of {len(self.geoshapes)} point{pl}>'

    @classmethod
    def from_geojson(cls, gjson: Dict[str, Any]) -> 'MultiGeoPoint':
        geom = _geometry_from_geo_interface(gjson)
        if not geom.get('type') == 'MultiPoint':
            raise ValueError(
                f'Geometry represents a {geom.get("type")}; expected MultiPoint.'
            )

        return MultiGeoPoint([
            GeoPoint(coord) for coord in _coords_from_geo_interface(geom.get('coordinates', []))
        ])

    @classmethod
    def _from_wkt_body(cls, body: str) -> 'MultiGeoPoint':
        return MultiGeoPoint([GeoPoint(coord) for coord in parse_multipoint_body(body)])

    def _to_shapely(self):
        import shapely  # pylint: disable=import-outside-toplevel
        return shapely.MultiPoint([x.coordinate.to_float() for x in self.geoshapes])

    def to_wkt(self) -> str:
        points = ', '.join(f'({shape.coordinate.to_wkt()})' for shape in self.geoshapes)
        return f'MULTIPOINT ({points})'


class MultiGeoPolygon(MultiShapeBase):

    geometry_type = 'MultiPolygon'

    def __init__(self, geoshapes: Sequence[GeoPolygon]):
        super().__init__()
        if not geoshapes:
            raise ValueError('A MultiPolygon requires at least one polygon.')

        self.geoshapes: List[GeoPolygon] = list(geoshapes)

    def __repr__(self):
        pl = 's' if len(self.geoshapes) != 1 else ''
        return f'<MultiGeoPolygon of {len(self.geoshapes)} polygon{pl}>'

    @classmethod
    def from_geojson(cls, gjson: Dict[str, Any]) -> 'MultiGeoPolygon':
        geom = _geometry_from_geo_interface(gjson)
        if not geom.get('type') == 'MultiPolygon':
            raise ValueError(
                f'Geometry represents a {geom.get("type")}; expected MultiPolygon.'
            )

        polygons: List[List[List[Coordinate]]] = [
            [_coords_from_geo_interface(ring) for ring in polygon]
            for polygon in geom.get('coordinates', [])
        ]
        return MultiGeoPolygon([GeoPolygon(rings) for rings in polygons])

    @classmethod
    def _from_wkt_body(cls, body: str) -> 'MultiGeoPolygon':
        return MultiGeoPolygon([GeoPolygon(rings) for rings in parse_polygon_group_list(body)])

    def _to_shapely(self):
        import shapely  # pylint: disable=import-outside-toplevel
        return shapely.MultiPolygon([x.to_shapely() for x in self.geoshapes])

    def to_wkt(self) -> str:
        """
        Converts the shape to its WKT string representation. Every ring is
        closed on output.

        Returns:
            str
        """
        polygons = ', '.join(
            '(' + ', '.join(self._linear_ring_to_wkt(ring) for ring in shape.rings) + ')'
            for shape in self.geoshapes
        )
        return f'MULTIPOLYGON ({polygons})'
