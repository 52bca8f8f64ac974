"""
Constants declarations for wktsketch
"""

# WKT geometry tags understood by the parser, in the order they're reported
SUPPORTED_TYPES = (
    'POINT',
    'MULTIPOINT',
    'LINESTRING',
    'MULTILINESTRING',
    'POLYGON',
    'MULTIPOLYGON',
    'GEOMETRYCOLLECTION',
)

NO_GEOMETRY_MESSAGE = 'Could not parse WKT. Supported: ' + ', '.join(SUPPORTED_TYPES)

# Decimal places kept by quantize_wkt
DEFAULT_QUANTIZE_PRECISION = 2
