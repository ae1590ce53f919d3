"""
simpletimer demo script.

Run this directly to see every way of reading a measurement:
    python demo.py
"""

import random
import time

import simpletimer
from simpletimer import print_result, print_unit_table, ticks, units


def do_long_task() -> None:
    """Sleep for a fixed 750 ms."""
    time.sleep(0.75)


def do_long_task_with_param(seconds: float) -> None:
    """Sleep for the given number of seconds."""
    time.sleep(seconds)


def do_long_task_with_return() -> int:
    """Sleep one second and return a random number."""
    time.sleep(1.0)
    return random.randint(1, 100)


def do_long_task_with_return_and_param(seconds: float) -> int:
    """Sleep for the given number of seconds and return a random number."""
    time.sleep(seconds)
    return random.randint(1, 100)


def main():
    """Time each task variant once and print the results several ways."""
    param = 0.75

    void_no_param = simpletimer.time(do_long_task)
    void_with_param = simpletimer.time(lambda: do_long_task_with_param(param))
    return_no_param = simpletimer.time(do_long_task_with_return)
    return_with_param = simpletimer.time_call(do_long_task_with_return_and_param, param)

    print("\n--- direct access: fractional seconds ---")
    print_result("void, no param", void_no_param)
    print_result("void, curried param", void_with_param)
    print_result("return, no param", return_no_param)
    print_result("return, curried param", return_with_param)

    print("\n--- every unit ---")
    print_unit_table(return_with_param)

    print("\n--- views ---")
    view = return_with_param.get_duration_view(units.microseconds)
    print(f"  {view.as_(float) / 1_000_000.0} seconds (from us)")
    print(f"  {return_with_param.get_duration_view(units.milliseconds).as_(float)} milliseconds")
    print(f"  {return_with_param.get_duration_view(ticks.milliseconds).as_(int)} ms (truncated)")
    print(f"  {return_with_param.get_duration_view(ticks.seconds).as_(int)} s (truncated)")

    print("\n--- extreme units ---")
    for unit in (units.decades, units.centuries, units.millennia):
        print(f"  {return_with_param.get_duration_view(unit).as_(float)} {unit.name}")


if __name__ == "__main__":
    main()
