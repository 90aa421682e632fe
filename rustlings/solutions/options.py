"""Solution to the option exercise."""

from __future__ import annotations


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at the given hour, or None for an invalid hour.

    There are 5 pieces from 1 to 21 o'clock and none at 0, 22 and 23.
    """
    if 1 <= time_of_day <= 21:
        return 5
    if time_of_day in (0, 22, 23):
        return 0
    return None