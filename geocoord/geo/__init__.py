"""Canonical geographic coordinates.

Components:
    Coordinate: Immutable latitude/longitude value, always canonical
    Latitude: Latitude unit family (degrees in, radians stored)
    Longitude: Longitude unit family (degrees in, radians stored)
    canonicalize: Fold a raw radian pair into the canonical range
    canonicalize_array: Vectorised fold over NumPy arrays
    coordinates_from_arrays: Batch Coordinate construction

Typical Usage:
    >>> from geocoord.geo import Coordinate
    >>> a = Coordinate.from_deg(0, -10)
    >>> b = Coordinate.from_deg(95, 10)   # past the North Pole
    >>> print(b)
    Coordinate[Longitude=-170.000000, Latitude=85.000000]
    >>> sorted([a, b])[0] is b
    True
"""

from .canonical import canonicalize, canonicalize_array
from .coordinate import Coordinate, Latitude, Longitude, coordinates_from_arrays

__all__ = [
    "Coordinate",
    "Latitude",
    "Longitude",
    "canonicalize",
    "canonicalize_array",
    "coordinates_from_arrays",
]
