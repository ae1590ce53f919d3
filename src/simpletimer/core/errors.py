"""Exceptions raised by simpletimer itself. Failures of timed callables pass through untouched."""


class SimpleTimerError(Exception):
    """Base class for all simpletimer errors."""


class ClockUnavailableError(SimpleTimerError, RuntimeError):
    """The configured clock source cannot be used on this installation."""
