"""Module for parsing WKT text and shape records into wktsketch geometries"""

__all__ = [
    'ParseResult', 'dispatch', 'parse_shape_record', 'parse_wkt', 'parse_wkt_document'
]

from typing import Any, Callable, Dict, List, Optional

from pydantic import validate_call

from wktsketch._base import BaseShape
from wktsketch._const import NO_GEOMETRY_MESSAGE
from wktsketch.collections import GeometryCollection, ShapeCollection
from wktsketch.exceptions import UnrecognizedTypeError, WKTParseError
from wktsketch.multistructures import MultiGeoLineString, MultiGeoPoint, MultiGeoPolygon
from wktsketch.structures import GeoLineString, GeoPoint, GeoPolygon
from wktsketch.utils.logging import LOGGER
from wktsketch.wkt import TextRange, iter_statements, read_statement


def _parse_geometry_collection(body: str) -> GeometryCollection:
    """
    Finds each member statement inside a GEOMETRYCOLLECTION body and
    dispatches it. Members that fail to parse are left out; the rest of the
    collection survives.
    """
    members = []
    for statement in iter_statements(body):
        try:
            geometry = dispatch(statement.tag, statement.body)
        except ValueError as exc:
            LOGGER.debug('Skipping GEOMETRYCOLLECTION member %s: %s', statement.tag, exc)
            continue

        if geometry is not None:
            members.append(geometry)

    return GeometryCollection(members)


_PARSER_MAP: Dict[str, Callable[[str], BaseShape]] = {
    'POINT': GeoPoint._from_wkt_body,
    'LINESTRING': GeoLineString._from_wkt_body,
    'POLYGON': GeoPolygon._from_wkt_body,
    'MULTIPOINT': MultiGeoPoint._from_wkt_body,
    'MULTILINESTRING': MultiGeoLineString._from_wkt_body,
    'MULTIPOLYGON': MultiGeoPolygon._from_wkt_body,
    'GEOMETRYCOLLECTION': _parse_geometry_collection,
}

_GEO_INTERFACE_MAP = {
    'Point': GeoPoint,
    'LineString': GeoLineString,
    'Polygon': GeoPolygon,
    'MultiPoint': MultiGeoPoint,
    'MultiLineString': MultiGeoLineString,
    'MultiPolygon': MultiGeoPolygon,
    'GeometryCollection': GeometryCollection,
}


def dispatch(tag: str, body: Optional[str]) -> Optional[BaseShape]:
    """
    Builds the geometry described by a type tag and the text between its
    outer parentheses.

    Args:
        tag: (str)
            The geometry type, e.g. 'POLYGON' (case insensitive)

        body: (str)
            The statement body, or None if the statement was EMPTY

    Returns:
        The geometry, or None for an EMPTY statement

    Raises:
        UnrecognizedTypeError if the tag isn't supported, or another
        WKTParseError if the body is malformed
    """
    parser = _PARSER_MAP.get(tag.upper())
    if parser is None:
        raise UnrecognizedTypeError(tag)

    if body is None:
        return None

    return parser(body)


def parse_wkt(wkt: str) -> Optional[BaseShape]:
    """
    Parses a single WKT statement into its corresponding geometry.

    Args:
        wkt: (str)
            A well known text string holding exactly one statement

    Returns:
        BaseShape, subtype determined by input, or None if the statement
        is EMPTY
    """
    text = wkt.strip()
    statement = read_statement(text)
    if statement.end != len(text):
        raise WKTParseError(f'Unexpected text after WKT statement: {text[statement.end:]!r}')

    return dispatch(statement.tag, statement.body)


def parse_shape_record(record: Any) -> BaseShape:
    """
    Parses a shape record, as handed over by a drawing surface, into its
    corresponding geometry. Records follow the geo interface layout
    ({'type': ..., 'coordinates': ...}), optionally wrapped in a GeoJSON
    Feature. Objects exposing __geo_interface__ are accepted as well.

    Args:
        record:
            The shape record

    Returns:
        BaseShape, subtype determined by input
    """
    if hasattr(record, '__geo_interface__') and not isinstance(record, dict):
        record = record.__geo_interface__

    if not isinstance(record, dict):
        raise UnrecognizedTypeError(type(record).__name__)

    geom = record if 'type' in record and record['type'] != 'Feature' else record.get('geometry')
    geom_type = geom.get('type') if isinstance(geom, dict) else None
    if geom_type not in _GEO_INTERFACE_MAP:
        raise UnrecognizedTypeError(str(geom_type))

    return _GEO_INTERFACE_MAP[geom_type].from_geojson(geom)


class ParseResult:

    """
    The outcome of parsing a WKT document.

    Attributes:
        shapes:
            Every renderable shape, in document order

        statement_ranges:
            The [start, end) offsets of each statement that parsed, in
            document order

        shape_to_statement:
            For each shape, the index of the statement range it came from

        geometries:
            For each statement range, the geometry it produced (None for
            EMPTY statements)

        diagnostic:
            A message for the caller when non-blank text produced no shapes
            at all, otherwise None
    """

    def __init__(self):
        self.shapes: List[BaseShape] = []
        self.statement_ranges: List[TextRange] = []
        self.shape_to_statement: List[int] = []
        self.geometries: List[Optional[BaseShape]] = []
        self.diagnostic: Optional[str] = None

    def __iter__(self):
        return self.shapes.__iter__()

    def __len__(self):
        return self.shapes.__len__()

    def __repr__(self):
        return (
            f'<ParseResult of {len(self.shapes)} shapes '
            f'from {len(self.statement_ranges)} statements>'
        )

    @property
    def collection(self) -> ShapeCollection:
        return ShapeCollection(self.shapes)

    @property
    def ok(self) -> bool:
        return self.diagnostic is None

    def _add_statement(self, text_range: TextRange, geometry: Optional[BaseShape]):
        statement_idx = len(self.statement_ranges)
        self.statement_ranges.append(text_range)
        self.geometries.append(geometry)
        if geometry is None:
            return

        for shape in geometry.split():
            self.shapes.append(shape)
            self.shape_to_statement.append(statement_idx)

    def shapes_for_statement(self, statement_idx: int) -> List[BaseShape]:
        """All shapes produced by the statement at the given index"""
        return [
            shape for shape, idx in zip(self.shapes, self.shape_to_statement)
            if idx == statement_idx
        ]

    @validate_call
    def statement_at(self, offset: int) -> Optional[int]:
        """
        Finds the statement under a caret offset. Both ends of a statement's
        range count as inside it.

        Args:
            offset: (int)
                A character offset into the parsed text

        Returns:
            The statement index, or None if the offset falls between statements
        """
        for idx, text_range in enumerate(self.statement_ranges):
            if offset in text_range:
                return idx

        return None

    def statement_for_shape(self, shape_idx: int) -> int:
        """The index of the statement a shape came from"""
        return self.shape_to_statement[shape_idx]


def parse_wkt_document(text: str) -> ParseResult:
    """
    Parses a block of WKT text holding any number of statements. Statements
    may share a line or span several. Statements that fail to parse are
    skipped without affecting the others.

    Args:
        text: (str)
            The WKT document

    Returns:
        ParseResult
    """
    result = ParseResult()
    for statement in iter_statements(text):
        try:
            geometry = dispatch(statement.tag, statement.body)
        except ValueError as exc:
            LOGGER.debug(
                'Skipping statement at offsets %d-%d: %s', statement.start, statement.end, exc
            )
            continue

        result._add_statement(statement.range, geometry)

    if text.strip() and not result.shapes:
        result.diagnostic = NO_GEOMETRY_MESSAGE

    return result
