"""
Clock sources used to take time points.

Two sources exist:
  - MonotonicClock : time.perf_counter, never goes backwards (default)
  - WallClock      : an external function returning float seconds,
                     normally MPI_Wtime via mpi4py

The source is chosen once, when the package is first imported, from the
SIMPLETIMER_WALL_CLOCK environment variable. There is no way to switch
it afterwards.
"""

import logging
import os
import time
from dataclasses import dataclass
from typing import Callable, Mapping, Optional, Union

from .duration import Duration
from .errors import ClockUnavailableError

logger = logging.getLogger(__name__)

WALL_CLOCK_ENV = "SIMPLETIMER_WALL_CLOCK"
_TRUTHY = {"1", "true", "yes", "on", "mpi"}


@dataclass(frozen=True)
class TimePoint:
    """A moment on some clock, stored as float seconds since that clock's epoch."""

    since_epoch: float

    def __sub__(self, other: "TimePoint") -> Duration:
        return Duration(self.since_epoch - other.since_epoch)


class MonotonicClock:
    """System monotonic clock with the highest available resolution."""

    name = "monotonic"

    def now(self) -> TimePoint:
        return TimePoint(time.perf_counter())


class WallClock:
    """
    Clock backed by an external wall-clock function.

    The provider is not required to be monotonic; a backwards step shows
    up as a negative duration.
    """

    def __init__(self, provider: Callable[[], float], name: str = "wall"):
        """
        Args:
            provider: Zero-argument callable returning seconds since an
                unspecified epoch
            name: Label used in diagnostics
        """
        self._provider = provider
        self.name = name

    def now(self) -> TimePoint:
        return TimePoint(float(self._provider()))


Clock = Union[MonotonicClock, WallClock]


def mpi_wall_clock() -> WallClock:
    """
    Return a WallClock reading MPI_Wtime.

    The MPI environment is initialised by mpi4py on import.

    Raises:
        ClockUnavailableError: mpi4py is not installed or fails to load
    """
    try:
        from mpi4py import MPI
    except ImportError as exc:
        raise ClockUnavailableError(
            f"{WALL_CLOCK_ENV} is set but mpi4py cannot be imported; "
            "install simpletimer[mpi] or unset the variable"
        ) from exc
    return WallClock(MPI.Wtime, name="mpi")


def select_clock(use_wall_clock: bool) -> Clock:
    """Build the clock for the given flag. The MPI symbol is only touched when the flag is on."""
    if use_wall_clock:
        return mpi_wall_clock()
    return MonotonicClock()


def clock_from_environment(environ: Optional[Mapping[str, str]] = None) -> Clock:
    """Build the clock selected by SIMPLETIMER_WALL_CLOCK in environ (default: os.environ)."""
    env = os.environ if environ is None else environ
    flag = env.get(WALL_CLOCK_ENV, "").strip().lower() in _TRUTHY
    clock = select_clock(flag)
    logger.debug("simpletimer clock source: %s", clock.name)
    return clock


_active_clock: Clock = clock_from_environment()


def active_clock() -> Clock:
    """Return the clock chosen at import time."""
    return _active_clock
