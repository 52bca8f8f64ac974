"""
Representation of a single x/y position
"""

__all__ = ['Coordinate']

import math
from typing import Tuple, Union

from wktsketch.exceptions import MalformedNumericError, WKTParseError
from wktsketch.utils.functions import format_number
from wktsketch.utils.logging import warn_once


class Coordinate:
    """
    Representation of a planar position. X is longitude-like and Y is
    latitude-like; no bounds are enforced on either.
    """

    def __init__(
        self,
        x: Union[float, int, str],
        y: Union[float, int, str],
    ):
        x, y = float(x), float(y)
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValueError(f'Coordinate values must be finite, got ({x}, {y})')

        self.x = x
        self.y = y

    def __eq__(self, other):
        if not isinstance(other, Coordinate):
            return False

        return self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f'<Coordinate({self.x}, {self.y})>'

    @property
    def latitude(self) -> float:
        return self.y

    @property
    def longitude(self) -> float:
        return self.x

    @classmethod
    def from_wkt(cls, wkt_str: str) -> 'Coordinate':
        """
        Create a Coordinate from a WKT substring, eg. "1.0 2.0". Note that
        this is NOT the same as a WKT POINT, which should be parsed via
        wktsketch.parsers.parse_wkt()

        Z and M values, if present, are validated and then discarded.

        Args:
            wkt_str:
                A WKT-represented coordinate.

        Returns:
            Coordinate
        """
        parts = wkt_str.split()
        if len(parts) < 2:
            raise MalformedNumericError(wkt_str.strip())

        if len(parts) > 4:
            raise WKTParseError(f'Too many ordinates in coordinate: {wkt_str.strip()!r}')

        values = []
        for part in parts:
            try:
                value = float(part)
            except ValueError as exc:
                raise MalformedNumericError(part) from exc

            if not math.isfinite(value):
                raise MalformedNumericError(part)

            values.append(value)

        if len(values) > 2:
            warn_once(
                'Z/M values are not supported and will be ignored.'
            )

        return cls(values[0], values[1])

    def to_float(self) -> Tuple[float, float]:
        """
        Converts the coordinate to a tuple of floats (x, y)

        Returns:
            Tuple[float, float]
        """
        return self.x, self.y

    def to_str(self) -> Tuple[str, str]:
        """
        Converts the coordinate to a tuple of strings (x, y), each number
        written in its natural decimal form

        Returns:
            Tuple[str, str]
        """
        return format_number(self.x), format_number(self.y)

    def to_wkt(self) -> str:
        """The coordinate as a WKT substring, e.g. '30 10'"""
        return ' '.join(self.to_str())
