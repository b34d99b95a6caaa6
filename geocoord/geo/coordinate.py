"""Canonical geographic coordinate value type.

``Coordinate`` wraps a latitude/longitude pair that is always canonical::

     -90° <= latitude  <= +90°
    -180° <  longitude <= +180°

Raw angles of any magnitude are folded on construction (see
:mod:`geocoord.geo.canonical`), and the instance is frozen afterwards.
Negative latitude is the southern hemisphere, negative longitude the western.

Coordinates are totally ordered: western longitudes sort before eastern
ones, and for equal longitudes southern latitudes sort before northern ones.

Serialized form:
    ``to_dict()`` stores the canonical radians under ``latitudeRadians`` and
    ``longitudeRadians``. ``from_dict()`` rebuilds the pair without folding
    it again, so already-canonical values round-trip bit-for-bit. The loader
    does not trust its input blindly: values that are non-finite or outside
    the canonical range are rejected unless ``refold=True`` is passed, in
    which case they are canonicalized like any raw input.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass

import numpy as np

from geocoord.config import BASE_TYPE, DISPLAY_PRECISION, LATITUDE_FIELD, LONGITUDE_FIELD
from geocoord.errors import CoordinateTypeError, InvalidCoordinateError
from geocoord.geo.canonical import (
    NEGATIVE_PI_OVER_2,
    PI,
    PI_OVER_2,
    _as_float,
    canonicalize,
    canonicalize_array,
)
from geocoord.unit import Degree, Radian, UnitFloat

logger = logging.getLogger(__name__)


class Latitude(Degree):
    """A unit representing latitude.

    Latitude is its own unit family so it cannot be compared with a
    longitude or a bare angle by accident. Values are given in degrees and
    stored in radians.

    Example:
        >>> lat = Latitude(37.5665)
        >>> float(lat)
        0.6556...
        >>> str(lat)
        '37.5665 °N/S'
    """

    IS_FAMILY_ROOT = True
    SYMBOL = "°N/S"


class Longitude(Degree):
    """A unit representing longitude.

    Example:
        >>> lon = Longitude(126.978)
        >>> str(lon)
        '126.978 °E/W'
    """

    IS_FAMILY_ROOT = True
    SYMBOL = "°E/W"


@dataclass(frozen=True, slots=True, eq=False)
class Coordinate:
    """A point on the globe in canonical latitude/longitude form.

    Any angle may be passed for latitude and longitude (angle units, or plain
    numbers taken as radians); both are canonicalized before the instance
    becomes visible, which may also change the longitude when the latitude
    runs past a pole. Text, values too large for a float and non-finite
    values raise ``InvalidCoordinateError``.

    Attributes:
        latitude (Latitude): Canonical latitude, -90° to +90°.
        longitude (Longitude): Canonical longitude, greater than -180° up to +180°.

    Example:
        >>> c = Coordinate.from_deg(100, 10)
        >>> print(c)
        Coordinate[Longitude=-170.000000, Latitude=80.000000]
        >>> Coordinate.from_deg(0, -180) == Coordinate.from_deg(0, 180)
        True
    """

    latitude: Latitude
    longitude: Longitude

    def __post_init__(self) -> None:
        latitude, longitude = canonicalize(self.latitude, self.longitude)
        object.__setattr__(self, "latitude", Latitude.from_si(latitude))
        object.__setattr__(self, "longitude", Longitude.from_si(longitude))

    @classmethod
    def _from_canonical(cls, latitude: float, longitude: float) -> Coordinate:
        # caller guarantees the pair is already canonical
        coordinate = object.__new__(cls)
        object.__setattr__(coordinate, "latitude", Latitude.from_si(latitude))
        object.__setattr__(coordinate, "longitude", Longitude.from_si(longitude))
        return coordinate

    @classmethod
    def from_deg(cls, lat: float, lon: float) -> Coordinate:
        """Create a Coordinate from latitude and longitude in degrees.

        Args:
            lat (float): Latitude in decimal degrees, any finite value.
            lon (float): Longitude in decimal degrees, any finite value.

        Returns:
            Coordinate: The canonicalized coordinate.

        Example:
            >>> seoul = Coordinate.from_deg(37.5665, 126.9780)
            >>> mcmurdo = Coordinate.from_deg(-77.8419, 166.6863)
        """
        return cls(Latitude(_as_float(lat, "latitude")), Longitude(_as_float(lon, "longitude")))

    @classmethod
    def from_rad(cls, lat: float, lon: float) -> Coordinate:
        """Create a Coordinate from latitude and longitude in radians."""
        return cls(lat, lon)

    def with_latitude(self, latitude: UnitFloat | float) -> Coordinate:
        """Return a new Coordinate with ``latitude`` and this longitude."""
        return type(self)(latitude, self.longitude)

    def with_longitude(self, longitude: UnitFloat | float) -> Coordinate:
        """Return a new Coordinate with this latitude and ``longitude``."""
        return type(self)(self.latitude, longitude)

    # -------------------------------- Ordering --------------------------------
    def compare_to(self, other: Coordinate) -> int:
        """Compare with another coordinate.

        Western longitudes are less than eastern longitudes. If longitudes
        are equal, southern latitudes are less than northern latitudes.

        Returns:
            int: -1, 0 or 1.
        """
        if self.longitude != other.longitude:
            return -1 if self.longitude < other.longitude else 1
        if self.latitude != other.latitude:
            return -1 if self.latitude < other.latitude else 1
        return 0

    def compare_any(self, other: object) -> int:
        """Compare with a value of unknown type.

        Raises:
            CoordinateTypeError: If ``other`` is not a Coordinate.
        """
        if not isinstance(other, Coordinate):
            raise CoordinateTypeError(other)
        return self.compare_to(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return self.latitude == other.latitude and self.longitude == other.longitude

    def __hash__(self) -> int:
        return hash((float(self.longitude), float(self.latitude)))

    def __lt__(self, other: Coordinate) -> bool:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: Coordinate) -> bool:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: Coordinate) -> bool:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: Coordinate) -> bool:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __str__(self) -> str:
        return (
            f"Coordinate[Longitude={self.longitude.degrees:.{DISPLAY_PRECISION}f}, "
            f"Latitude={self.latitude.degrees:.{DISPLAY_PRECISION}f}]"
        )

    # -------------------------------- Serialization --------------------------------
    def to_dict(self) -> dict[str, float]:
        """Serialise the canonical radians."""
        return {
            LATITUDE_FIELD: float(self.latitude),
            LONGITUDE_FIELD: float(self.longitude),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, object], *, refold: bool = False) -> Coordinate:
        """Rebuild a Coordinate from its serialized form.

        The stored radians are used as-is. They must be finite and inside the
        canonical range unless ``refold`` is set, in which case they are
        canonicalized like raw input.

        Raises:
            InvalidCoordinateError: If fields are missing, unexpected,
                non-numeric, non-finite or out of range.
        """
        if not isinstance(data, Mapping):
            msg = f"serialized coordinate must be a mapping, got {type(data).__name__}"
            raise InvalidCoordinateError(msg)

        expected = {LATITUDE_FIELD, LONGITUDE_FIELD}
        if set(data) != expected:
            msg = f"serialized coordinate must have exactly {sorted(expected)}, got {sorted(map(str, data))}"
            raise InvalidCoordinateError(msg)

        latitude = data[LATITUDE_FIELD]
        longitude = data[LONGITUDE_FIELD]
        for name, value in ((LATITUDE_FIELD, latitude), (LONGITUDE_FIELD, longitude)):
            if isinstance(value, bool) or not isinstance(value, int | float):
                msg = f"{name} must be a number, got {type(value).__name__}"
                raise InvalidCoordinateError(msg)

        if refold:
            return cls._from_canonical(*canonicalize(latitude, longitude))

        latitude = _as_float(latitude, LATITUDE_FIELD)
        longitude = _as_float(longitude, LONGITUDE_FIELD)
        if not (NEGATIVE_PI_OVER_2 <= latitude <= PI_OVER_2 and -PI < longitude <= PI):
            # NaN fails every comparison and lands here as well
            logger.debug("Rejected non-canonical record lat=%r lon=%r", latitude, longitude)
            msg = f"serialized coordinate ({latitude!r}, {longitude!r}) is not canonical"
            raise InvalidCoordinateError(msg)

        return cls._from_canonical(latitude, longitude)

    def to_json(self) -> str:
        """Serialise to a JSON object string."""
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: str | bytes, *, refold: bool = False) -> Coordinate:
        """Rebuild a Coordinate from :meth:`to_json` output.

        Raises:
            InvalidCoordinateError: If the text is not valid JSON or not a valid record.
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise InvalidCoordinateError(f"invalid coordinate JSON: {exc}") from exc
        return cls.from_dict(data, refold=refold)

    def __reduce__(self):
        return (type(self)._from_canonical, (float(self.latitude), float(self.longitude)))


def coordinates_from_arrays(
    latitudes: BASE_TYPE,
    longitudes: BASE_TYPE,
    unit: type[UnitFloat] = Radian,
) -> list[Coordinate]:
    """Build canonical Coordinates from arrays of raw angles.

    Folding is vectorised with :func:`canonicalize_array`; the result is
    identical to constructing each Coordinate one by one.

    Args:
        latitudes: Raw latitudes in ``unit``.
        longitudes: Raw longitudes in ``unit``, broadcastable against ``latitudes``.
        unit: Angle unit of the inputs, ``Radian`` or ``Degree``.

    Returns:
        list[Coordinate]: Coordinates in flattened (C) order.

    Example:
        >>> coordinates_from_arrays([0, 100], [-180, 10], unit=Degree)
        [Coordinate(latitude=0 °N/S ..., Coordinate(latitude=80 °N/S ...]
    """
    scale = unit.SCALE_TO_SI
    lat, lon = canonicalize_array(
        np.asarray(latitudes, dtype=np.float64) * scale,
        np.asarray(longitudes, dtype=np.float64) * scale,
    )
    return [
        Coordinate._from_canonical(float(a), float(b))
        for a, b in zip(lat.ravel(), lon.ravel())
    ]
