"""Unit family foundation for type-safe angles.

Every unit class belongs to a family identified by its ``ROOT`` class.
Values can only be compared or converted within the same family,
which keeps a latitude from being silently compared with a longitude or a
plain radian.

Key Concepts:
- ROOT Class: The class that defines a family
- IS_FAMILY_ROOT: Marks the class that starts a new family
- Automatic Assignment: ROOT is resolved from the MRO at class creation

Example:
    >>> class Radian(UnitFloat):
    ...     IS_FAMILY_ROOT = True
    >>> class Degree(Radian):
    ...     pass  # ROOT = Radian
    >>> class Latitude(Degree):
    ...     IS_FAMILY_ROOT = True  # starts its own family
"""

from __future__ import annotations

from typing import ClassVar

Number = int | float


class Unit:
    """Base class for all unit types.

    Attributes:
        ROOT (ClassVar[type[Unit]]): Root class defining the unit family.
        SYMBOL (ClassVar[str]): Unit symbol for display purposes.
        IS_FAMILY_ROOT (ClassVar[bool]): Indicates if this class is a root unit.
    """

    __slots__ = ()
    __array_priority__ = 1000

    ROOT: ClassVar[type[Unit]]
    SYMBOL: ClassVar[str] = ""
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        """Resolve the ROOT class of a newly created unit subclass."""
        super().__init_subclass__(**kwargs)
        if "ROOT" in cls.__dict__ and cls.ROOT is not None:
            return

        if cls.__dict__.get("IS_FAMILY_ROOT", False):
            cls.ROOT = cls
            return

        for base in cls.mro()[1:]:
            if base.__dict__.get("IS_FAMILY_ROOT", False):
                cls.ROOT = base
                return

        cls.ROOT = cls

    @classmethod
    def _check_same_root(cls, unit_type: type) -> None:
        """Ensure ``unit_type`` belongs to the same unit family.

        Raises:
            TypeError: If ``unit_type`` is not a unit or belongs to another family.
        """
        other_root = getattr(unit_type, "ROOT", None)
        if cls.ROOT is not other_root:
            other_name = other_root.__name__ if other_root else unit_type.__name__
            msg = f"cannot mix {cls.ROOT.__name__} with {other_name}"
            raise TypeError(msg)
