import logging

import pytest

from wktsketch import *
from wktsketch._const import NO_GEOMETRY_MESSAGE
from wktsketch.exceptions import *
from wktsketch.parsers import dispatch
from wktsketch.wkt import TextRange


def test_dispatch():
    assert dispatch('POINT', '1 2') == GeoPoint(Coordinate(1., 2.))
    assert dispatch('point', '1 2') == GeoPoint(Coordinate(1., 2.))
    assert dispatch('LINESTRING', '1 2, 3 4') == \
        GeoLineString([Coordinate(1., 2.), Coordinate(3., 4.)])
    assert isinstance(dispatch('MULTILINESTRING', '(1 2, 3 4), (5 6, 7 8)'), MultiGeoLineString)
    assert isinstance(dispatch('MULTIPOLYGON', '((1 2, 3 4, 5 6))'), MultiGeoPolygon)

    # EMPTY statements produce nothing
    assert dispatch('POLYGON', None) is None

    with pytest.raises(UnrecognizedTypeError):
        dispatch('CIRCLE', '1 2')

    with pytest.raises(UnrecognizedTypeError):
        dispatch('CIRCLE', None)

    with pytest.raises(MalformedNumericError):
        dispatch('POINT', '1 x')


def test_parse_wkt():
    assert parse_wkt('POINT (1 2)') == GeoPoint(Coordinate(1., 2.))
    assert parse_wkt('  POINT(1 2)\n') == GeoPoint(Coordinate(1., 2.))
    assert parse_wkt('POINT ZM (1 2 3 4)') == GeoPoint(Coordinate(1., 2.))
    assert parse_wkt('LineString (30 10, 10 30, 40 40)') == GeoLineString(
        [Coordinate(30., 10.), Coordinate(10., 30.), Coordinate(40., 40.)]
    )
    assert parse_wkt('POLYGON ((30 10, 40 40, 20 40, 10 20, 30 10))') == GeoPolygon(
        [[
            Coordinate(30., 10.), Coordinate(40., 40.), Coordinate(20., 40.),
            Coordinate(10., 20.), Coordinate(30., 10.)
        ]]
    )
    assert parse_wkt('MULTIPOINT ((10 40), (40 30))') == MultiGeoPoint(
        [GeoPoint(Coordinate(10., 40.)), GeoPoint(Coordinate(40., 30.))]
    )
    assert parse_wkt('MULTILINESTRING ((10 10, 20 20), (40 40, 30 30))') == MultiGeoLineString([
        GeoLineString([Coordinate(10., 10.), Coordinate(20., 20.)]),
        GeoLineString([Coordinate(40., 40.), Coordinate(30., 30.)]),
    ])
    assert len(parse_wkt('MULTIPOLYGON (((30 20, 45 40, 10 40, 30 20)), ((15 5, 40 10, 10 20, 5 10, 15 5)))')) == 2
    assert parse_wkt('GEOMETRYCOLLECTION (POINT (4 6), LINESTRING (4 6, 7 10))') == GeometryCollection([
        GeoPoint(Coordinate(4., 6.)),
        GeoLineString([Coordinate(4., 6.), Coordinate(7., 10.)]),
    ])
    assert parse_wkt('POINT EMPTY') is None
    assert parse_wkt('GEOMETRYCOLLECTION EMPTY') is None

    with pytest.raises(WKTParseError):
        parse_wkt('123')

    with pytest.raises(WKTParseError):
        parse_wkt('worse')

    with pytest.raises(WKTParseError):
        parse_wkt('POINT (1 2) POINT (3 4)')

    with pytest.raises(UnbalancedSpanError):
        parse_wkt('POINT (1 2')

    with pytest.raises(UnrecognizedTypeError):
        parse_wkt('CIRCLE (1 2)')

    with pytest.raises(ValueError):
        parse_wkt('POLYGON ((1 2, 3 4), 5 6)')


def test_parse_wkt_document_round_trip():
    shapes = [
        GeoPoint(Coordinate(1., 2.)),
        GeoLineString([Coordinate(0.5, 0.25), Coordinate(-1., 3.)]),
        GeoPolygon([
            [Coordinate(0., 0.), Coordinate(10., 0.), Coordinate(10., 10.), Coordinate(0., 0.)],
            [Coordinate(2., 2.), Coordinate(4., 2.), Coordinate(4., 4.), Coordinate(2., 2.)],
        ]),
        MultiGeoLineString([
            GeoLineString([Coordinate(0., 0.), Coordinate(1., 1.)]),
            GeoLineString([Coordinate(2., 2.), Coordinate(3., 3.)]),
        ]),
    ]
    text = dump_wkt(shapes)
    result = parse_wkt_document(text)
    assert result.shapes == shapes
    assert dump_wkt(result.shapes) == text


def test_parse_wkt_document_ring_closure():
    result = parse_wkt_document('POLYGON ((30 10, 40 40, 20 40, 10 20))')
    assert len(result.shapes[0].outline) == 4
    assert dump_wkt(result.shapes) == 'POLYGON ((30 10, 40 40, 20 40, 10 20, 30 10))'

    closed = 'POLYGON ((30 10, 40 40, 20 40, 10 20, 30 10))'
    assert dump_wkt(parse_wkt_document(closed).shapes) == closed


def test_parse_wkt_document_multipoint_forms():
    bare = parse_wkt_document('MULTIPOINT (10 40, 40 30)')
    wrapped = parse_wkt_document('MULTIPOINT ((10 40), (40 30))')
    expected = [GeoPoint(Coordinate(10., 40.)), GeoPoint(Coordinate(40., 30.))]
    assert bare.shapes == expected
    assert wrapped.shapes == expected
    assert bare.shape_to_statement == [0, 0]


def test_parse_wkt_document_collection():
    result = parse_wkt_document('GEOMETRYCOLLECTION (POINT (4 6), LINESTRING (4 6, 7 10))')
    assert result.shapes == [
        GeoPoint(Coordinate(4., 6.)),
        GeoLineString([Coordinate(4., 6.), Coordinate(7., 10.)]),
    ]
    assert len(result.statement_ranges) == 1
    assert result.shape_to_statement == [0, 0]


def test_parse_wkt_document_nested_collection():
    text = (
        'POINT (0 0)\n'
        'GEOMETRYCOLLECTION (\n'
        '  POINT (1 2),\n'
        '  GEOMETRYCOLLECTION (LINESTRING (0 0, 1 1), POLYGON ((0 0, 1 0, 1 1, 0 0))),\n'
        '  MULTIPOINT (5 5, 6 6),\n'
        '  POINT EMPTY\n'
        ')'
    )
    result = parse_wkt_document(text)
    assert [x.geometry_type for x in result.shapes] == [
        'Point', 'Point', 'LineString', 'Polygon', 'Point', 'Point'
    ]
    assert result.shape_to_statement == [0, 1, 1, 1, 1, 1]
    assert isinstance(result.geometries[1], GeometryCollection)


def test_parse_wkt_document_collection_bad_member():
    result = parse_wkt_document('GEOMETRYCOLLECTION (POINT (1 2), POINT (x y), CIRCLE (1 2))')
    assert result.shapes == [GeoPoint(Coordinate(1., 2.))]


def test_parse_wkt_document_multi_shapes():
    result = parse_wkt_document(
        'MULTIPOLYGON (((30 20, 45 40, 10 40, 30 20)), ((15 5, 40 10, 10 20, 5 10, 15 5)))\n'
        'MULTILINESTRING ((10 10, 20 20), (40 40, 30 30))'
    )
    assert [x.geometry_type for x in result.shapes] == ['Polygon', 'Polygon', 'MultiLineString']
    assert result.shape_to_statement == [0, 0, 1]
    assert result.shapes_for_statement(0) == result.shapes[:2]
    assert result.statement_for_shape(2) == 1


def test_parse_wkt_document_partial_failure():
    text = 'POINT (1 2)\nBOGUS (1 2 3))\nPOINT (3 4)'
    result = parse_wkt_document(text)
    assert result.shapes == [GeoPoint(Coordinate(1., 2.)), GeoPoint(Coordinate(3., 4.))]
    assert result.statement_ranges == [TextRange(0, 11), TextRange(27, 38)]
    assert [text[x.start:x.end] for x in result.statement_ranges] == ['POINT (1 2)', 'POINT (3 4)']
    assert result.shape_to_statement == [0, 1]
    assert result.ok


def test_parse_wkt_document_malformed_numeric():
    result = parse_wkt_document('POINT (1 abc)\nPOINT (3 4)\nLINESTRING (0 0, nan 1)')
    assert result.shapes == [GeoPoint(Coordinate(3., 4.))]
    assert len(result.statement_ranges) == 1


def test_parse_wkt_document_unbalanced():
    result = parse_wkt_document('POLYGON ((0 0, 1 0, 1 1, 0 0)\nPOINT (3 4)')
    assert result.shapes == [GeoPoint(Coordinate(3., 4.))]


def test_parse_wkt_document_blank():
    for text in ('', '   \n\t  '):
        result = parse_wkt_document(text)
        assert result.shapes == []
        assert result.statement_ranges == []
        assert result.shape_to_statement == []
        assert result.diagnostic is None
        assert result.ok


def test_parse_wkt_document_no_geometry():
    for text in ('BOGUS (1 2)', 'hello world', 'POINT (1', 'POINT EMPTY'):
        result = parse_wkt_document(text)
        assert result.shapes == []
        assert result.diagnostic == NO_GEOMETRY_MESSAGE
        assert not result.ok

    assert 'GEOMETRYCOLLECTION' in NO_GEOMETRY_MESSAGE

    # EMPTY statements are still recorded
    assert parse_wkt_document('POINT EMPTY').statement_ranges == [TextRange(0, 11)]


def test_parse_wkt_document_range_coverage():
    text = (
        'POINT Z (1 2 3)  LINESTRING EMPTY\n'
        'junk MULTIPOINT ((1 2), (3 4)), polygon((0 0, 1 0, 1 1))'
    )
    result = parse_wkt_document(text)
    assert [text[x.start:x.end] for x in result.statement_ranges] == [
        'POINT Z (1 2 3)',
        'LINESTRING EMPTY',
        'MULTIPOINT ((1 2), (3 4))',
        'polygon((0 0, 1 0, 1 1))',
    ]
    for prev, cur in zip(result.statement_ranges, result.statement_ranges[1:]):
        assert prev.end <= cur.start

    assert all(0 <= idx < len(result.statement_ranges) for idx in result.shape_to_statement)
    assert result.geometries[1] is None


def test_parse_wkt_document_logging(caplog):
    with caplog.at_level(logging.DEBUG, logger='wktsketch'):
        parse_wkt_document('BOGUS (1 2)')

    assert 'Skipping statement at offsets 0-11' in caplog.text
    assert 'BOGUS' in caplog.text


def test_parse_result_statement_at():
    result = parse_wkt_document('POINT (1 2)\n\nPOINT (3 4)')
    assert result.statement_ranges == [TextRange(0, 11), TextRange(13, 24)]
    assert result.statement_at(0) == 0
    assert result.statement_at(11) == 0
    assert result.statement_at(12) is None
    assert result.statement_at(13) == 1
    assert result.statement_at(24) == 1
    assert result.statement_at(100) is None

    with pytest.raises(ValueError):
        result.statement_at('abc')


def test_parse_result_collection():
    result = parse_wkt_document('POINT (1 2) LINESTRING (0 0, 1 1)')
    assert len(result) == 2
    assert list(result) == result.shapes
    assert result.collection.to_wkt() == 'POINT (1 2)\nLINESTRING (0 0, 1 1)'
    assert result.collection.bounds == (0., 0., 1., 2.)
    assert repr(result) == '<ParseResult of 2 shapes from 2 statements>'


def test_parse_shape_record():
    assert parse_shape_record({'type': 'Point', 'coordinates': [1, 2]}) == \
        GeoPoint(Coordinate(1., 2.))
    assert parse_shape_record(
        {'type': 'Feature', 'geometry': {'type': 'Point', 'coordinates': [1, 2]}}
    ) == GeoPoint(Coordinate(1., 2.))

    polygon = GeoPolygon([[Coordinate(0., 0.), Coordinate(1., 0.), Coordinate(1., 1.), Coordinate(0., 0.)]])
    assert parse_shape_record(polygon) == polygon

    with pytest.raises(UnrecognizedTypeError):
        parse_shape_record({'type': 'Circle'})

    with pytest.raises(UnrecognizedTypeError):
        parse_shape_record('POINT (1 2)')
