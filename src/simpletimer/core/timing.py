"""
Top-level timing functions.

Usage:
    result = time(compute)            # TimeResult or VoidTimeResult
    result = time_value(compute)      # always TimeResult
    result = time_void(do_work)       # always VoidTimeResult
    result = time_call(fn, 1, x=2)    # time fn(1, x=2)

The measurement window covers the call to the callable and nothing
else. Exceptions raised by the callable propagate and no record is
returned.
"""

import functools
import inspect
from typing import Any, Callable, Optional, TypeVar, Union

from . import clock
from .result import TimeResult, VoidTimeResult
from .timer import _CONSTRUCTION_TOKEN, DurationSlot, _ScopedTimer

T = TypeVar("T")

_VOID_ANNOTATIONS = (None, type(None), "None")


def _declared_return_kind(fn: Callable) -> Optional[bool]:
    """
    Return True if fn is annotated to return a value, False if annotated
    to return None, and None when there is no usable annotation.
    """
    try:
        annotation = inspect.signature(fn).return_annotation
    except (TypeError, ValueError):
        return None
    if annotation is inspect.Signature.empty:
        return None
    return annotation not in _VOID_ANNOTATIONS


def time_value(fn: Callable[[], T]) -> TimeResult[T]:
    """
    Time fn() and keep its return value.

    Args:
        fn: Zero-argument callable

    Returns:
        TimeResult holding fn's return value and the elapsed time
    """
    slot = DurationSlot()
    with _ScopedTimer(slot, clock.active_clock(), _CONSTRUCTION_TOKEN):
        result = fn()
    return TimeResult(result, slot.duration)


def time_void(fn: Callable[[], Any]) -> VoidTimeResult:
    """
    Time fn() and discard whatever it returns.

    Args:
        fn: Zero-argument callable

    Returns:
        VoidTimeResult holding the elapsed time
    """
    record = VoidTimeResult()
    with _ScopedTimer(record, clock.active_clock(), _CONSTRUCTION_TOKEN):
        fn()
    return record


def _dispatch(fn: Callable, declared: Optional[bool]) -> Union[TimeResult, VoidTimeResult]:
    if declared is False:
        return time_void(fn)

    measured = time_value(fn)
    if declared is None and measured.function_result is None:
        return VoidTimeResult(measured.duration)
    return measured


def time(fn: Callable[[], T]) -> Union[TimeResult[T], VoidTimeResult]:
    """
    Time a single call of fn, choosing the record shape from its return kind.

    A return annotation of None gives a VoidTimeResult and any other
    annotation a TimeResult. Without an annotation (lambdas, builtins)
    the call decides: returning None gives a VoidTimeResult.

    Args:
        fn: Zero-argument callable; bind arguments with a lambda,
            functools.partial or time_call()

    Returns:
        TimeResult or VoidTimeResult
    """
    return _dispatch(fn, _declared_return_kind(fn))


def time_call(fn: Callable[..., T], *args, **kwargs) -> Union[TimeResult[T], VoidTimeResult]:
    """
    Time fn(*args, **kwargs) without writing a wrapper lambda.

    The record shape follows the same rules as time().
    """
    bound = functools.partial(fn, *args, **kwargs)
    return _dispatch(bound, _declared_return_kind(fn))
