"""Module for wktsketch type hinting"""

__all__ = ['GeoShape', 'MultiShape', 'ShapeRecord', 'SingleShape']

from typing import Any, Dict

from wktsketch._base import BaseShape, MultiShapeBase, SingleShapeBase

# Any geometry
GeoShape = BaseShape

# Individual and Multi-Shapes
SingleShape = SingleShapeBase  # Union[GeoPoint, GeoLineString, GeoPolygon]
MultiShape = MultiShapeBase  # Union[MultiGeoPoint, MultiGeoLineString, MultiGeoPolygon]

# A geometry record handed over by a drawing surface, e.g. {'type': 'Point', 'coordinates': [1, 2]}
ShapeRecord = Dict[str, Any]
