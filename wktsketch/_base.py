"""
Base class declarations for wktsketch
"""

from __future__ import annotations

from abc import abstractmethod, ABC
from functools import lru_cache
from typing import Any, Callable, Dict, List, Tuple

import numpy as np
from typing_extensions import Self

from wktsketch.coordinates import Coordinate


class BaseShape(ABC):

    """
    A geometry value. The concrete class is the geometry's type; it is
    decided once, when the geometry is built, and never re-derived from the
    nesting of its coordinates.
    """

    geometry_type: str
    to_shapely: Callable

    def __init__(self):
        super().__init__()
        self.to_shapely = lru_cache(maxsize=1)(self._to_shapely)

    def __getstate__(self):
        state = self.__dict__.copy()
        state['to_shapely'] = None
        return state

    def __setstate__(self, state):
        state['to_shapely'] = lru_cache(maxsize=1)(self._to_shapely)
        self.__dict__ = state

    @property
    @abstractmethod
    def __geo_interface__(self):
        pass

    @abstractmethod
    def __eq__(self, other) -> bool:
        """Test equality"""

    @abstractmethod
    def __hash__(self) -> int:
        """Create unique hash of this object"""

    @abstractmethod
    def __repr__(self):
        """REPL representation of this object"""

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """
        The x and y min/max bounds of the shape.

        Returns:
            (min_x, min_y, max_x, max_y)
        """
        coords = self.coordinates
        if not coords:
            raise ValueError(f'{self.geometry_type} has no coordinates.')

        arr = np.array([coord.to_float() for coord in coords])
        min_x, min_y = arr.min(axis=0)
        max_x, max_y = arr.max(axis=0)
        return float(min_x), float(min_y), float(max_x), float(max_y)

    @property
    def centroid(self) -> Coordinate:
        """
        The mean position of the shape's coordinates.

        Returns:
            Coordinate
        """
        coords = self.coordinates
        if not coords:
            raise ValueError(f'{self.geometry_type} has no coordinates.')

        x, y = np.mean(np.array([coord.to_float() for coord in coords]), axis=0)
        return Coordinate(x, y)

    @property
    @abstractmethod
    def coordinates(self) -> List[Coordinate]:
        """Every coordinate in the shape, flattened, in storage order"""

    @abstractmethod
    def copy(self) -> Self:
        """Returns a copy of this shape"""

    @classmethod
    def from_wkt(cls, wkt_str: str) -> Self:
        """
        Construct this geometry type from a single Well-Known Text (WKT)
        statement.

        Raises:
            ValueError if the statement is invalid or describes another type
        """
        from wktsketch.parsers import parse_wkt

        shape = parse_wkt(wkt_str)
        if not isinstance(shape, cls):
            raise ValueError(f'Invalid WKT {cls.geometry_type}: {wkt_str}')

        return shape

    @staticmethod
    def _coords_to_wkt(coords: List[Coordinate]) -> str:
        """
        Converts a list of coordinates into a parenthesized wkt string,
        e.g. '(30 10, 40 40)'.
        """
        return f'({", ".join(coord.to_wkt() for coord in coords)})'

    @classmethod
    def _linear_ring_to_wkt(cls, ring: List[Coordinate]) -> str:
        """
        Converts a linear ring into a wkt string, appending the first
        coordinate when the ring isn't already closed. The ring itself is
        left untouched.

        Args:
            ring:
                A list of Coordinates

        Returns:
            The wkt-formatted string
        """
        return cls._coords_to_wkt(cls._closed(ring))

    @staticmethod
    def _closed(ring: List[Coordinate]) -> List[Coordinate]:
        """A closed copy of a linear ring"""
        if ring[0] != ring[-1]:
            return [*ring, ring[0]]

        return list(ring)

    def split(self) -> List['BaseShape']:
        """
        The individual renderable shapes this geometry contributes, e.g. a
        MultiGeoPoint contributes one GeoPoint per member.
        """
        return [self]

    @abstractmethod
    def _to_shapely(self):
        """Converts the shape to its shapely equivalent"""

    @abstractmethod
    def to_wkt(self) -> str:
        """
        Converts the shape to its WKT string representation

        Returns:
            str
        """


class SingleShapeBase(BaseShape, ABC):
    pass


class MultiShapeBase(BaseShape, ABC):

    geoshapes: List

    def __eq__(self, other):
        if not isinstance(other, type(self)):
            return False

        return self.geoshapes == other.geoshapes

    def __hash__(self) -> int:
        return hash((self.geometry_type, tuple(hash(x) for x in self.geoshapes)))

    def __iter__(self):
        return self.geoshapes.__iter__()

    def __len__(self):
        return self.geoshapes.__len__()

    @property
    def coordinates(self) -> List[Coordinate]:
        return [coord for shape in self.geoshapes for coord in shape.coordinates]

    @property
    def __geo_interface__(self):
        return {
            'type': self.geometry_type,
            'coordinates': [
                shape.__geo_interface__['coordinates'] for shape in self.geoshapes
            ]
        }

    def copy(self) -> Self:
        return type(self)([x.copy() for x in self.geoshapes])

    def split(self) -> List[BaseShape]:
        return [shape.copy() for shape in self.geoshapes]


def _coords_from_geo_interface(coords: List[Any]) -> List[Coordinate]:
    """Converts [[x, y], ...] (extra ordinates ignored) into Coordinates"""
    return [Coordinate(*coord[:2]) for coord in coords]


def _geometry_from_geo_interface(gjson: Dict[str, Any]) -> Dict[str, Any]:
    """Pulls the geometry out of a geo interface dict or a GeoJSON Feature"""
    if 'coordinates' in gjson or 'geometries' in gjson:
        return gjson

    return gjson.get('geometry') or {}
