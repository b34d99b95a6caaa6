"""Canonical latitude/longitude coordinates.

geocoord represents a point on the globe by latitude and longitude and
guarantees that every instance is expressed in one canonical range, no
matter which raw angles it was built from::

     -90° <= latitude  <= +90°
    -180° <  longitude <= +180°

Latitudes that run past a pole continue down the opposite meridian instead
of being clamped, so no input information is lost and construction never
fails for finite angles.

Package Components:
    Geographic Values (geocoord.geo):
        • Coordinate: Immutable canonical coordinate with total ordering
        • Latitude / Longitude: Separate unit families for each axis
        • canonicalize / canonicalize_array: Scalar and NumPy folding

    Measurement Framework (geocoord.unit):
        • Radian / Degree: Type-safe angles stored in radians

    Errors (geocoord.errors):
        • InvalidCoordinateError: Non-finite angles or bad serialized data
        • CoordinateTypeError: Comparison against a non-coordinate

Usage:
    >>> from geocoord import Coordinate
    >>> Coordinate.from_deg(100, 10) > Coordinate.from_deg(0, -175)
    True
    >>> record = Coordinate.from_deg(45, 190).to_dict()
    >>> Coordinate.from_dict(record)
    Coordinate(latitude=45 °N/S (= 0.785398 SI), longitude=-170 °E/W (= -2.96706 SI))
"""

from geocoord.errors import CoordinateError, CoordinateTypeError, InvalidCoordinateError
from geocoord.geo import Coordinate, Latitude, Longitude, canonicalize, canonicalize_array

__version__ = "0.1.0"

__all__ = [
    "Coordinate",
    "Latitude",
    "Longitude",
    "canonicalize",
    "canonicalize_array",
    "CoordinateError",
    "CoordinateTypeError",
    "InvalidCoordinateError",
]
