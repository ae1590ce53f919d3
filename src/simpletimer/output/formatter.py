"""
Console rendering for measurement records.

Turns a duration into a "<count> <symbol>" string in any unit at any
precision, and prints colour-coded result lines.
Color output uses ANSI codes via colorama for Windows compatibility.
"""

from typing import Optional, Union

import colorama

from ..core import ticks, units
from ..core.duration import Duration
from ..core.result import TimeResult, VoidTimeResult
from ..core.ticks import TickUnit
from ..core.units import Unit

colorama.just_fix_windows_console()


class _Color:
    """ANSI color constants."""

    RESET = colorama.Style.RESET_ALL
    DIM = colorama.Style.DIM
    BOLD = colorama.Style.BRIGHT
    CYAN = colorama.Fore.CYAN
    GREEN = colorama.Fore.GREEN
    YELLOW = colorama.Fore.YELLOW
    RED = colorama.Fore.RED
    WHITE = colorama.Fore.WHITE


_THRESHOLD_FAST_S = 0.001      # under 1 ms   -> green
_THRESHOLD_MEDIUM_S = 0.010    # under 10 ms  -> yellow
                               # 10 ms and above -> red

_READABLE_UNITS = (units.seconds, units.milliseconds, units.microseconds)


def _color_for_duration(seconds: float) -> str:
    """Return the appropriate color code based on how slow the measurement is."""
    if seconds < _THRESHOLD_FAST_S:
        return _Color.GREEN
    if seconds < _THRESHOLD_MEDIUM_S:
        return _Color.YELLOW
    return _Color.RED


def best_unit(duration: Duration) -> Unit:
    """
    Return the unit that keeps the count at or above 1.0.

    Chooses between s, ms, us and ns; anything under a microsecond
    falls through to nanoseconds.
    """
    magnitude = abs(duration.seconds)
    for unit in _READABLE_UNITS:
        if magnitude >= unit.scale:
            return unit
    return units.nanoseconds


def format_duration(duration: Duration, unit: Optional[Unit] = None, precision: int = 6) -> str:
    """
    Render a duration as "<count> <symbol>".

    Args:
        duration: Duration in any unit
        unit: Target unit; None picks best_unit()
        precision: Digits after the decimal point; ignored for tick units
    """
    target = unit or best_unit(duration)
    converted = duration.to(target)
    if isinstance(target, TickUnit):
        return f"{converted.count} {target.symbol}"
    return f"{converted.count:.{precision}f} {target.symbol}"


def _format_result_line(label: str, result: Union[TimeResult, VoidTimeResult],
                        unit: Optional[Unit], precision: int) -> str:
    """Render a single record as a compact colored one-line string."""
    color = _color_for_duration(result.duration.seconds)
    duration_str = f"{color}{format_duration(result.duration, unit, precision):>20}{_Color.RESET}"
    name_str = f"{_Color.CYAN}{label:<40}{_Color.RESET}"

    returned_str = ""
    if isinstance(result, TimeResult):
        returned_str = f"  {_Color.DIM}[returned {result.function_result!r}]{_Color.RESET}"

    return f"  {name_str} {duration_str}{returned_str}"


def print_result(label: str, result: Union[TimeResult, VoidTimeResult],
                 unit: Optional[Unit] = None, precision: int = 6) -> None:
    """Print a single measurement record to stdout."""
    print(_format_result_line(label, result, unit, precision))


def print_unit_table(result: Union[TimeResult, VoidTimeResult], precision: int = 6) -> None:
    """Print the record's duration in every precision-preserving and tick unit."""
    print(f"  {_Color.BOLD}{_Color.WHITE}full precision{_Color.RESET}")
    for unit in units.CATALOGUE:
        print(f"    {format_duration(result.duration, unit, precision):>32}  {_Color.DIM}{unit.name}{_Color.RESET}")
    print(f"  {_Color.BOLD}{_Color.WHITE}whole ticks (truncated){_Color.RESET}")
    for unit in ticks.CATALOGUE:
        print(f"    {format_duration(result.duration, unit):>32}  {_Color.DIM}{unit.name}{_Color.RESET}")
