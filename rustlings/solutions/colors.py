"""Solution to the fallible colour conversion exercise."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

_CHANNELS = 3
_CHANNEL_RANGE = range(0, 256)


class IntoColorError(ValueError):
    """Raised when values cannot be converted into a Color."""


class BadLenError(IntoColorError):
    """Raised when the number of values is not three."""


class IntConversionError(IntoColorError):
    """Raised when a value is outside the 0..=255 range."""


@dataclass(frozen=True)
class Color:
    """An RGB colour with channels in the 0..=255 range."""

    red: int
    green: int
    blue: int

    @classmethod
    def try_from(cls, values: Sequence[int]) -> Color:
        """Build a Color from exactly three integers in the 0..=255 range."""
        values = tuple(values)
        if len(values) != _CHANNELS:
            raise BadLenError(f"expected {_CHANNELS} values, got {len(values)}")
        for value in values:
            if value not in _CHANNEL_RANGE:
                raise IntConversionError(f"{value} is not in the range 0..=255")
        red, green, blue = values
        return cls(red=red, green=green, blue=blue)