"""
simpletimer - time a single function call and read the result in any unit.

Provides:
  - time()               : time a zero-argument callable
  - time_value()         : same, always keeping the return value
  - time_void()          : same, never keeping the return value
  - time_call()          : time fn(*args, **kwargs)
  - units                : precision-preserving units, picoseconds to millennia
  - ticks                : integer-tick units, nanoseconds to hours
  - TimeResult           : elapsed time plus the callable's return value
  - VoidTimeResult       : elapsed time only
  - DurationView         : numeric extraction in a chosen unit
  - format_duration()    : render a duration at a chosen unit and precision
  - print_result()       : print a colour-coded result line

The clock is the system monotonic clock unless SIMPLETIMER_WALL_CLOCK is
set when the package is first imported, in which case MPI_Wtime is used.
"""

from .core import ticks, units
from .core.clock import MonotonicClock, TimePoint, WallClock, active_clock
from .core.duration import Duration
from .core.errors import ClockUnavailableError, SimpleTimerError
from .core.result import TimeResult, VoidTimeResult
from .core.timing import time, time_call, time_value, time_void
from .core.view import DurationView

from .output.formatter import format_duration, print_result, print_unit_table

__all__ = [
    "time",
    "time_call",
    "time_value",
    "time_void",
    "units",
    "ticks",
    "Duration",
    "DurationView",
    "TimeResult",
    "VoidTimeResult",
    "TimePoint",
    "MonotonicClock",
    "WallClock",
    "active_clock",
    "SimpleTimerError",
    "ClockUnavailableError",
    "format_duration",
    "print_result",
    "print_unit_table",
]
