"""Exception taxonomy for geocoord.

All package errors derive from ``CoordinateError`` and also from the
built-in exception a caller would naturally catch, so ``except ValueError``
and ``except TypeError`` keep working.

- ``InvalidCoordinateError``: non-finite angles or a malformed/out-of-range
  serialized record.
- ``CoordinateTypeError``: a coordinate was compared with something that
  is not a coordinate through the fallible comparison adapter.
"""

from __future__ import annotations


class CoordinateError(Exception):
    """Base exception for all geocoord errors."""


class InvalidCoordinateError(CoordinateError, ValueError):
    """Angles or serialized values that cannot form a canonical coordinate."""


class CoordinateTypeError(CoordinateError, TypeError):
    """A non-coordinate value reached a coordinate-only operation."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"can only compare Coordinate with Coordinate, got {type(value).__name__}")
