"""
Duration value: a count of some time unit.

The canonical duration used throughout the library is a float count of
seconds. Durations in other units are derived from it on demand.
"""

import math
from dataclasses import dataclass
from fractions import Fraction
from typing import Union

from . import units
from .ticks import TickUnit
from .units import Unit

Count = Union[float, int]


def require_unit(unit) -> Unit:
    """Return unit unchanged, or raise TypeError if it is not a time unit."""
    if not isinstance(unit, Unit):
        raise TypeError(
            f"expected a time unit from simpletimer.units or simpletimer.ticks, "
            f"got {type(unit).__name__}: {unit!r}"
        )
    return unit


@dataclass(frozen=True)
class Duration:
    """
    An amount of time expressed as a count of a unit.

    Counts are floats for precision-preserving units and integers for
    tick units. Negative counts are allowed.
    """

    count: Count = 0.0
    unit: Unit = units.seconds

    @property
    def seconds(self) -> float:
        """Return the duration as float seconds."""
        if self.unit.scale == 1:
            return float(self.count)
        return float(self.count * self.unit.scale)

    def to(self, unit: Unit) -> "Duration":
        """
        Convert to another unit.

        Tick units truncate toward zero using exact rational arithmetic;
        every other unit keeps the fractional count.

        Raises:
            TypeError: unit is not a time unit
        """
        require_unit(unit)
        if unit == self.unit:
            return self
        if isinstance(unit, TickUnit):
            exact = Fraction(self.count) * self.unit.scale / unit.scale
            return Duration(math.trunc(exact), unit)
        return Duration(float(self.count) * float(self.unit.scale / unit.scale), unit)

    def __float__(self) -> float:
        return self.seconds

    def __add__(self, other: "Duration") -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.seconds + other.seconds)

    def __sub__(self, other: "Duration") -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.seconds - other.seconds)

    def __neg__(self) -> "Duration":
        return Duration(-self.count, self.unit)

    def __str__(self) -> str:
        return f"{self.count} {self.unit.symbol}"
