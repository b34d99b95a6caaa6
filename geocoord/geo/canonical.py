"""Folding of raw latitude/longitude angles into the canonical range.

Any pair of finite angles maps onto exactly one canonical pair::

     -90° <= latitude  <= +90°
    -180° <  longitude <= +180°

Latitude is treated as a walk along a meridian rather than a clamped value.
Start at the South Pole heading north: after 180° of latitude you reach the
North Pole, and carrying on in a straight line takes you down the opposite
meridian. So 100° of latitude is 80° on the meridian 180° away, and the
longitude is flipped accordingly.

Functions:
    canonicalize: Fold a single radian pair.
    canonicalize_array: Fold NumPy arrays of radians element-wise.

Example:
    >>> from math import radians, degrees
    >>> lat, lon = canonicalize(radians(100), radians(10))
    >>> round(degrees(lat), 9), round(degrees(lon), 9)
    (80.0, -170.0)
"""

from __future__ import annotations

import logging
import math

import numpy as np

from geocoord.config import BASE_TYPE
from geocoord.errors import InvalidCoordinateError

logger = logging.getLogger(__name__)

PI = math.pi
PI_OVER_2 = PI / 2
NEGATIVE_PI_OVER_2 = -PI_OVER_2
TWO_PI = PI + PI


def _as_float(value: object, name: str) -> float:
    """Convert a raw angle to float or raise InvalidCoordinateError."""
    # float() would parse text
    if isinstance(value, str | bytes | bytearray):
        raise InvalidCoordinateError(f"{name} must be a number, got {type(value).__name__}")
    try:
        return float(value)
    except (OverflowError, TypeError, ValueError) as exc:
        raise InvalidCoordinateError(f"{name} of type {type(value).__name__} is not a representable angle") from exc


def canonicalize(latitude: float, longitude: float) -> tuple[float, float]:
    """Fold a raw ``(latitude, longitude)`` radian pair into the canonical range.

    Latitudes exactly at a pole are kept and do not flip the meridian; only
    values strictly past a pole are reflected. Longitude -180° becomes +180°.

    Args:
        latitude (float): Raw latitude in radians, any finite value.
        longitude (float): Raw longitude in radians, any finite value.

    Returns:
        tuple[float, float]: Canonical ``(latitude, longitude)`` in radians.

    Raises:
        InvalidCoordinateError: If either angle is not a number, does not fit
            in a float, or is NaN or infinite.
    """
    latitude = _as_float(latitude, "latitude")
    longitude = _as_float(longitude, "longitude")
    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        logger.debug("Rejected non-finite angles lat=%r lon=%r", latitude, longitude)
        msg = f"latitude and longitude must be finite, got ({latitude!r}, {longitude!r})"
        raise InvalidCoordinateError(msg)

    latitude = math.fmod(latitude + PI, TWO_PI)
    if latitude < 0:
        latitude += TWO_PI
    latitude -= PI

    if latitude > PI_OVER_2:
        logger.debug("Latitude %r crossed the North Pole; flipping meridian", latitude)
        latitude = PI - latitude
        longitude += PI
    elif latitude < NEGATIVE_PI_OVER_2:
        logger.debug("Latitude %r crossed the South Pole; flipping meridian", latitude)
        latitude = -PI - latitude
        longitude += PI

    longitude = math.fmod(longitude + PI, TWO_PI)
    if longitude <= 0:
        longitude += TWO_PI
    longitude -= PI
    # a remainder below half an ulp of pi rounds onto the open bound
    if longitude <= -PI:
        longitude = PI

    return latitude, longitude


def canonicalize_array(latitudes: BASE_TYPE, longitudes: BASE_TYPE) -> tuple[np.ndarray, np.ndarray]:
    """Fold arrays of raw radian pairs element-wise.

    Performs exactly the same arithmetic as :func:`canonicalize`, so every
    element agrees bit-for-bit with the scalar result.

    Args:
        latitudes: Raw latitudes in radians (anything ``numpy.asarray`` accepts).
        longitudes: Raw longitudes in radians, broadcastable against ``latitudes``.

    Returns:
        tuple[np.ndarray, np.ndarray]: Canonical float64 latitude and longitude arrays.

    Raises:
        InvalidCoordinateError: If the shapes do not broadcast or any element is non-finite.
    """
    try:
        lat, lon = np.broadcast_arrays(
            np.asarray(latitudes, dtype=np.float64),
            np.asarray(longitudes, dtype=np.float64),
        )
    except ValueError as exc:
        raise InvalidCoordinateError(f"latitude and longitude shapes do not match: {exc}") from exc

    if not (np.isfinite(lat).all() and np.isfinite(lon).all()):
        raise InvalidCoordinateError("latitude and longitude arrays must be finite")

    lat = np.fmod(lat + PI, TWO_PI)
    lat = np.where(lat < 0, lat + TWO_PI, lat) - PI

    north = lat > PI_OVER_2
    south = lat < NEGATIVE_PI_OVER_2
    crossed = north | south
    if logger.isEnabledFor(logging.DEBUG) and crossed.any():
        logger.debug("%d of %d latitudes crossed a pole", int(crossed.sum()), crossed.size)

    lat = np.where(north, PI - lat, np.where(south, -PI - lat, lat))
    lon = np.where(crossed, lon + PI, lon)

    lon = np.fmod(lon + PI, TWO_PI)
    lon = np.where(lon <= 0, lon + TWO_PI, lon) - PI
    lon = np.where(lon <= -PI, PI, lon)

    return lat, lon
