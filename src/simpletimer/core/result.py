"""
Measurement records returned by the timing functions.

TimeResult carries the callable's return value next to the elapsed time;
VoidTimeResult carries the elapsed time only.
"""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from . import units
from .duration import Count, Duration, require_unit
from .units import Unit
from .view import DurationView

T = TypeVar("T")


class _DurationAccessors:
    """Unit-parameterised accessors shared by both record shapes."""

    duration: Duration

    def get_duration(self, unit: Unit = units.seconds) -> Duration:
        """
        Return the elapsed time converted to unit.

        Tick units truncate to whole ticks; all other units keep the
        fractional part.
        """
        return self.duration.to(require_unit(unit))

    def get_duration_count(self, unit: Unit = units.seconds) -> Count:
        """Return only the numeric count of get_duration(unit)."""
        return self.get_duration(unit).count

    def get_duration_view(self, unit: Unit = units.seconds) -> DurationView:
        """
        Return a DurationView in unit for numeric extraction.

        Example:
            result.get_duration_view(ticks.milliseconds).as_(int)
        """
        return DurationView(self.get_duration(unit))


@dataclass
class TimeResult(_DurationAccessors, Generic[T]):
    """Elapsed time of one call together with the value that call returned."""

    function_result: T
    duration: Duration = field(default_factory=Duration)


@dataclass
class VoidTimeResult(_DurationAccessors):
    """Elapsed time of one call that returned nothing."""

    duration: Duration = field(default_factory=Duration)
