"""Angular units.

All angles are stored in radians (the SI unit) and can be created from
either radians or degrees.

Classes:
    Radian: Base angular unit in radians (SI unit).
    Degree: Angular unit in degrees with automatic radian conversion.

Type Aliases:
    Angle: Union type for all angular units (Radian | Degree).

Example:
    >>> heading = Degree(45)
    >>> print(heading)  # "45.0 °"
    >>> heading.radians  # 0.7853981633974483
    >>> Radian(pi).degrees  # 180.0
"""

from __future__ import annotations

from math import pi

from .unit_float import UnitFloat


class Radian(UnitFloat):
    """Angular unit: Radian (SI base unit for angles).

    Attributes:
        IS_FAMILY_ROOT (bool): True, indicating this is the root angular unit.
        SCALE_TO_SI (float): 1.0, no conversion needed for SI base unit.
        SYMBOL (str): "rad", the standard symbol for radians.
    """

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "rad"

    @property
    def radians(self) -> float:
        """The angle in radians."""
        return float(self)

    @property
    def degrees(self) -> float:
        """The angle in degrees."""
        return float(self) / Degree.SCALE_TO_SI


class Degree(Radian):
    """Angular unit: Degree (1/360 of a full rotation).

    Values are converted to radians for storage, so ``float(Degree(90))``
    is ``pi / 2``.

    Attributes:
        SCALE_TO_SI (float): π/180, conversion factor from degrees to radians.
        SYMBOL (str): "°", the standard symbol for degrees.
    """

    SCALE_TO_SI = pi / 180
    SYMBOL = "°"


Angle = Radian | Degree
