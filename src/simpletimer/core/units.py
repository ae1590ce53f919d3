"""
Precision-preserving time units.

Every unit is a tag carrying its length in seconds as an exact fraction.
Converting into one of these units keeps the fractional part of the count.

Multi-year units are multiples of the Gregorian mean year (31 556 952 s).
"""

from dataclasses import dataclass
from fractions import Fraction
from typing import Union


@dataclass(frozen=True)
class Unit:
    """
    A named time unit whose counts are floating point.

    Attributes:
        name: Plural unit name, e.g. "milliseconds"
        symbol: Short display symbol, e.g. "ms"
        scale: Seconds per one unit
    """

    name: str
    symbol: str
    scale: Fraction

    def __post_init__(self):
        if self.scale <= 0:
            raise ValueError(f"unit scale must be positive, got {self.scale} for {self.name}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name})"


def _make(name: str, symbol: str, scale: Union[int, Fraction]) -> Unit:
    return Unit(name, symbol, Fraction(scale))


_YEAR = 31_556_952

picoseconds = _make("picoseconds", "ps", Fraction(1, 10**12))
nanoseconds = _make("nanoseconds", "ns", Fraction(1, 10**9))
microseconds = _make("microseconds", "us", Fraction(1, 10**6))
milliseconds = _make("milliseconds", "ms", Fraction(1, 10**3))
seconds = _make("seconds", "s", 1)
minutes = _make("minutes", "min", 60)
hours = _make("hours", "h", 3_600)
days = _make("days", "d", 86_400)
weeks = _make("weeks", "wk", 604_800)
years = _make("years", "yr", _YEAR)
decades = _make("decades", "dec", _YEAR * 10)
centuries = _make("centuries", "c", _YEAR * 100)
millennia = _make("millennia", "ka", _YEAR * 1_000)

CATALOGUE: tuple[Unit, ...] = (
    picoseconds,
    nanoseconds,
    microseconds,
    milliseconds,
    seconds,
    minutes,
    hours,
    days,
    weeks,
    years,
    decades,
    centuries,
    millennia,
)

_BY_KEY = {key: unit for unit in CATALOGUE for key in (unit.name, unit.symbol)}


def lookup(key: str) -> Unit:
    """Return the precision-preserving unit with the given name or symbol."""
    try:
        return _BY_KEY[key]
    except KeyError:
        raise KeyError(f"unknown time unit: {key!r}") from None
