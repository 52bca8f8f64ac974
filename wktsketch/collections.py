"""
Module for groups of shapes: the GEOMETRYCOLLECTION geometry, and the
editable scene of shapes that is written out as a block of WKT
"""

__all__ = ['GeometryCollection', 'ShapeCollection', 'dump_wkt']

from typing import Any, Dict, Iterable, List, Sequence, Tuple, Union

import numpy as np

from wktsketch._base import BaseShape, _geometry_from_geo_interface
from wktsketch.coordinates import Coordinate
from wktsketch.typing import GeoShape, ShapeRecord
from wktsketch.utils.logging import LOGGER


class GeometryCollection(BaseShape):

    """
    A heterogeneous, arbitrarily nested group of geometries. May be empty.

    Args:
        geometries: (List[BaseShape])
            The member geometries, which may themselves be collections
    """

    geometry_type = 'GeometryCollection'

    def __init__(self, geometries: Sequence[BaseShape]):
        super().__init__()
        self.geometries: List[BaseShape] = list(geometries)

    def __eq__(self, other) -> bool:
        if not isinstance(other, GeometryCollection):
            return False

        return self.geometries == other.geometries

    def __hash__(self) -> int:
        return hash((self.geometry_type, tuple(hash(x) for x in self.geometries)))

    def __iter__(self):
        return self.geometries.__iter__()

    def __len__(self):
        return self.geometries.__len__()

    def __repr__(self):
        pl = 'y' if len(self.geometries) == 1 else 'ies'
        return f'<GeometryCollection of {len(self.geometries)} geometr{pl}>'

    @property
    def __geo_interface__(self):
        return {
            'type': 'GeometryCollection',
            'geometries': [x.__geo_interface__ for x in self.geometries],
        }

    @property
    def coordinates(self) -> List[Coordinate]:
        return [coord for geometry in self.geometries for coord in geometry.coordinates]

    def copy(self) -> 'GeometryCollection':
        return GeometryCollection([x.copy() for x in self.geometries])

    @classmethod
    def from_geojson(cls, gjson: Dict[str, Any]) -> 'GeometryCollection':
        from wktsketch.parsers import parse_shape_record

        geom = _geometry_from_geo_interface(gjson)
        if not geom.get('type') == 'GeometryCollection':
            raise ValueError(
                f'Geometry represents a {geom.get("type")}; expected GeometryCollection.'
            )

        return GeometryCollection(
            [parse_shape_record(member) for member in geom.get('geometries', [])]
        )

    def split(self) -> List[BaseShape]:
        """Every renderable shape in the collection, nested collections flattened"""
        return [shape for geometry in self.geometries for shape in geometry.split()]

    def _to_shapely(self):
        import shapely  # pylint: disable=import-outside-toplevel
        return shapely.GeometryCollection([x.to_shapely() for x in self.geometries])

    def to_wkt(self) -> str:
        if not self.geometries:
            return 'GEOMETRYCOLLECTION EMPTY'

        return f'GEOMETRYCOLLECTION ({", ".join(x.to_wkt() for x in self.geometries)})'


class ShapeCollection:

    """
    The set of shapes currently placed on the drawing surface.

    Members may be geometries or geometry records (geo interface dicts, or
    GeoJSON Features wrapping them). Members that can't be classified as any
    supported geometry are left out.

    Args:
        geoshapes:
            The shapes, in drawing order
    """

    def __init__(self, geoshapes: Iterable[Any]):
        from wktsketch.parsers import parse_shape_record

        self.geoshapes: List[BaseShape] = []
        for shape in geoshapes:
            if isinstance(shape, BaseShape):
                self.geoshapes.append(shape)
                continue

            try:
                self.geoshapes.append(parse_shape_record(shape))
            except (TypeError, ValueError) as exc:
                LOGGER.debug('Excluding unrecognized shape %r: %s', shape, exc)

    def __bool__(self):
        return bool(self.geoshapes)

    def __contains__(self, item):
        return item in self.geoshapes

    def __eq__(self, other):
        if not isinstance(other, ShapeCollection):
            return False

        return self.geoshapes == other.geoshapes

    def __getitem__(self, item):
        return self.geoshapes[item]

    def __iter__(self):
        return self.geoshapes.__iter__()

    def __len__(self):
        return self.geoshapes.__len__()

    def __repr__(self):
        pl = 's' if len(self.geoshapes) != 1 else ''
        return f'<ShapeCollection with {len(self.geoshapes)} shape{pl}>'

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """
        The x and y min/max bounds across every shape in the collection.

        Returns:
            (min_x, min_y, max_x, max_y)
        """
        all_bounds = [x.bounds for x in self.geoshapes if x.coordinates]
        if not all_bounds:
            raise ValueError('Cannot compute the bounds of an empty collection.')

        return (
            min(x[0] for x in all_bounds),
            min(x[1] for x in all_bounds),
            max(x[2] for x in all_bounds),
            max(x[3] for x in all_bounds)
        )

    @property
    def centroid(self) -> Coordinate:
        """The average of the shapes' centroids"""
        centroids = [shape.centroid.to_float() for shape in self.geoshapes if shape.coordinates]
        if not centroids:
            raise ValueError('Cannot compute the centroid of an empty collection.')

        x, y = tuple(map(np.average, zip(*centroids)))
        return Coordinate(x, y)

    @classmethod
    def from_wkt(cls, wkt: str) -> 'ShapeCollection':
        """Parses a WKT document into the shapes it describes"""
        from wktsketch.parsers import parse_wkt_document

        return parse_wkt_document(wkt).collection

    def to_geo_interface(self) -> Dict[str, Any]:
        return {
            'type': 'FeatureCollection',
            'features': [
                {'type': 'Feature', 'geometry': shape.__geo_interface__, 'properties': {}}
                for shape in self.geoshapes
            ]
        }

    def to_wkt(self) -> str:
        """
        Writes every shape as its own WKT statement, one statement per line.

        Returns:
            str
        """
        return '\n'.join(shape.to_wkt() for shape in self.geoshapes)


def dump_wkt(
    shapes: Union[GeoShape, ShapeRecord, Iterable[Union[GeoShape, ShapeRecord]]]
) -> str:
    """
    Converts one shape or shape record, or a sequence of them, to WKT.
    Anything that can't be classified as a supported geometry is skipped.

    Args:
        shapes:
            A geometry or shape record, or an iterable of geometries and
            shape records

    Returns:
        str
    """
    if isinstance(shapes, BaseShape):
        return shapes.to_wkt()

    if isinstance(shapes, dict) or hasattr(shapes, '__geo_interface__'):
        shapes = [shapes]

    return ShapeCollection(shapes).to_wkt()
