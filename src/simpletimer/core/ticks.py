"""
Integer-tick time units.

Same scales as the matching units in `units`, but a conversion into one
of these yields a whole number of ticks, truncated toward zero.
"""

from fractions import Fraction

from .units import Unit


class TickUnit(Unit):
    """A time unit whose counts are integers truncated toward zero."""


nanoseconds = TickUnit("nanoseconds", "ns", Fraction(1, 10**9))
microseconds = TickUnit("microseconds", "us", Fraction(1, 10**6))
milliseconds = TickUnit("milliseconds", "ms", Fraction(1, 10**3))
seconds = TickUnit("seconds", "s", Fraction(1))
minutes = TickUnit("minutes", "min", Fraction(60))
hours = TickUnit("hours", "h", Fraction(3_600))

CATALOGUE: tuple[TickUnit, ...] = (
    nanoseconds,
    microseconds,
    milliseconds,
    seconds,
    minutes,
    hours,
)

_BY_KEY = {key: unit for unit in CATALOGUE for key in (unit.name, unit.symbol)}


def lookup(key: str) -> TickUnit:
    """Return the integer-tick unit with the given name or symbol."""
    try:
        return _BY_KEY[key]
    except KeyError:
        raise KeyError(f"unknown tick unit: {key!r}") from None
