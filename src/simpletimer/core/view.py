"""
Read-only projection of a duration in a chosen unit.

Usage:
    view = result.get_duration_view(units.milliseconds)
    view.as_(float)   # 750.0123
    view.as_(int)     # 750
"""

import math
import numbers
from dataclasses import dataclass

from .duration import Count, Duration


@dataclass(frozen=True)
class DurationView:
    """Wraps a Duration already converted to the unit the caller asked for."""

    duration: Duration

    def count(self) -> Count:
        """Return the raw count in the view's unit."""
        return self.duration.count

    def unwrap(self) -> Duration:
        """Return the underlying duration."""
        return self.duration

    def as_(self, rep):
        """
        Return the count converted to the numeric type rep.

        Integral targets truncate toward zero; tick-unit views are
        already whole numbers so the conversion is exact. Other real
        targets (float, Fraction, ...) take the count as is. Passing
        Duration returns the underlying duration unchanged.

        Very small units over very long durations are not range-checked.

        Raises:
            TypeError: rep is neither Duration nor a real numeric type
        """
        if rep is Duration:
            return self.duration
        if isinstance(rep, type) and issubclass(rep, numbers.Integral):
            return rep(math.trunc(self.duration.count))
        if isinstance(rep, type) and issubclass(rep, numbers.Real):
            return rep(self.duration.count)
        raise TypeError(f"cannot extract a duration count as {rep!r}; use an int or float type")

    def __float__(self) -> float:
        return float(self.duration.count)

    def __int__(self) -> int:
        return math.trunc(self.duration.count)
