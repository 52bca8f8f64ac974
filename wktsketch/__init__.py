
from wktsketch._version import __version__  # noqa: F401
from wktsketch.utils.logging import LOGGER
from wktsketch.coordinates import Coordinate
from wktsketch.structures import GeoLineString, GeoPoint, GeoPolygon
from wktsketch.multistructures import MultiGeoLineString, MultiGeoPoint, MultiGeoPolygon
from wktsketch.collections import GeometryCollection, ShapeCollection, dump_wkt
from wktsketch.parsers import ParseResult, parse_shape_record, parse_wkt, parse_wkt_document
from wktsketch.utils.functions import quantize_wkt


__all__ = [
    'Coordinate',
    'GeoLineString',
    'GeoPoint',
    'GeoPolygon',
    'GeometryCollection',
    'MultiGeoLineString',
    'MultiGeoPoint',
    'MultiGeoPolygon',
    'ParseResult',
    'ShapeCollection',
    'LOGGER',
    'dump_wkt',
    'parse_shape_record',
    'parse_wkt',
    'parse_wkt_document',
    'quantize_wkt',
]
