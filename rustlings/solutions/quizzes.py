"""Solutions to the quiz exercises."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


def calculate_price_of_apples(quantity: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    return quantity * 2 if quantity <= 40 else quantity


@dataclass(frozen=True)
class Uppercase:
    """Upper-case the string."""


@dataclass(frozen=True)
class Trim:
    """Trim whitespace from both ends of the string."""


@dataclass(frozen=True)
class Append:
    """Append the string to itself ``times`` more times."""

    times: int


Command = Uppercase | Trim | Append


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string and return the results."""
    output = []
    for text, command in items:
        match command:
            case Uppercase():
                output.append(text.upper())
            case Trim():
                output.append(text.strip())
            case Append(times=times):
                output.append(text * (times + 1))
            case _:
                raise TypeError(f"unknown command: {command!r}")
    return output


@dataclass
class ReportCard:
    """A report card whose grade may be numeric or alphabetical."""

    grade: float | str
    student_name: str
    student_age: int

    def print(self) -> str:
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {self.grade}"
        )