"""Global configuration and type definitions for geocoord.

Type Definitions:
    BASE_TYPE: Numeric input accepted by the canonicalizer. Python scalars
               for single coordinates and NumPy arrays for batch folding.

Constants:
    DISPLAY_PRECISION: Decimal places used by ``str(Coordinate)``.
    LATITUDE_FIELD / LONGITUDE_FIELD: Field names of the serialized record.

Example:
    >>> from geocoord.config import BASE_TYPE
    >>> import numpy as np
    >>> scalar: BASE_TYPE = 1.5707963267948966
    >>> batch: BASE_TYPE = np.array([0.0, 3.0, -7.0])
"""

from numpy import ndarray

BASE_TYPE = int | float | ndarray

DISPLAY_PRECISION = 6

LATITUDE_FIELD = "latitudeRadians"
LONGITUDE_FIELD = "longitudeRadians"
