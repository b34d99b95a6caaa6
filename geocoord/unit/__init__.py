"""Type-safe angle units.

All values are ``float`` subclasses stored in radians. Units of the same
family compare and convert freely; mixing families raises ``TypeError``.

Unit Families:
    - Angle Family: Radian (root), Degree
    - Latitude and Longitude (see ``geocoord.geo``) are families of their own

Example:
    >>> from geocoord.unit import Degree, Radian
    >>> Degree(180) == Radian(math.pi)
    True
    >>> Degree(45).as_unit(Radian)
    0.785398 rad (= 0.785398 SI)
"""

from .unit_angle import Angle, Degree, Radian
from .unit_base import Unit
from .unit_float import UnitFloat

__all__ = [
    "Unit",
    "UnitFloat",
    "Radian",
    "Degree",
    "Angle",
]
