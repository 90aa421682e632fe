"""Solutions to the conditional exercises."""

from __future__ import annotations


def bigger(a: int, b: int) -> int:
    """Return the bigger of the two numbers."""
    if a > b:
        return a
    return b


def foo_if_fizz(fizzish: str) -> str:
    """Map "fizz" to "foo", "fuzz" to "bar" and anything else to "baz"."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


_HABITATS = {"crab": "Beach", "gopher": "Burrow", "snake": "Desert"}


def animal_habitat(animal: str) -> str:
    """Return where the animal lives, or "Unknown"."""
    return _HABITATS.get(animal, "Unknown")