"""
Scoped measurement handle.

Opening the handle reads the start time point; closing it reads the end
time point and writes end minus start into the slot it was given. Only
the timing functions in `timing` may create one.
"""

from typing import Optional

from .clock import Clock, TimePoint
from .duration import Duration

# Held by timing.py; anything else constructing a handle is rejected.
_CONSTRUCTION_TOKEN = object()


class DurationSlot:
    """Caller-visible location a handle writes its elapsed time into."""

    __slots__ = ("duration",)

    def __init__(self):
        self.duration = Duration()


class _ScopedTimer:
    """
    Context manager that brackets one region of code.

    The start clock read is the last thing __enter__ does and the end
    clock read is the first thing __exit__ does. The slot is written on
    every exit, including when the region raises; the exception is never
    suppressed.

    Handles cannot be copied, pickled or entered twice.
    """

    __slots__ = ("_slot", "_clock", "_start", "_used")

    def __init__(self, slot, clock: Clock, token: object = None):
        """
        Args:
            slot: Object with a writable `duration` attribute
            clock: Clock used for both reads
            token: Private construction token
        """
        if token is not _CONSTRUCTION_TOKEN:
            raise TypeError(
                "measurement handles cannot be created directly; "
                "use simpletimer.time() instead"
            )
        self._slot = slot
        self._clock = clock
        self._start: Optional[TimePoint] = None
        self._used = False

    def __enter__(self) -> "_ScopedTimer":
        if self._used:
            raise TypeError("a measurement handle can only be used once")
        self._used = True
        self._start = self._clock.now()
        return self

    def __exit__(self, *_) -> None:
        end = self._clock.now()
        self._slot.duration = end - self._start

    def __copy__(self):
        raise TypeError("measurement handles cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError("measurement handles cannot be copied")

    def __reduce__(self):
        raise TypeError("measurement handles cannot be pickled")
