"""Solutions to the iterator exercises."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from enum import Enum


def capitalize_first(text: str) -> str:
    """Upper-case the first character: "hello" -> "Hello"."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalise each word: ["hello", "world"] -> ["Hello", "World"]."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalise each word and join them: ["hello", " ", "world"] -> "Hello World"."""
    return "".join(capitalize_words_vector(words))


class DivisionError(ArithmeticError):
    """Raised when a division cannot be done exactly."""


class NotDivisibleError(DivisionError):
    """The dividend is not evenly divisible by the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor


class DivideByZeroError(DivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")


def divide(a: int, b: int) -> int:
    """Return a / b when a is evenly divisible by b."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(dividend=a, divisor=b)
    return a // b


_NUMBERS = (27, 297, 38502, 81)


def result_with_list() -> list[int]:
    """Divide every number by 27; the first failure is raised."""
    return [divide(n, 27) for n in _NUMBERS]


def list_of_results() -> list[int | DivisionError]:
    """Divide every number by 27, keeping each quotient or error in place."""
    results: list[int | DivisionError] = []
    for n in _NUMBERS:
        try:
            results.append(divide(n, 27))
        except DivisionError as exc:
            results.append(exc)
    return results


def factorial(num: int) -> int:
    """Return num!"""
    if num < 0:
        raise ValueError("factorial of a negative number")
    return math.prod(range(1, num + 1))


class Progress(Enum):
    """Progress on an exercise."""

    NONE = "none"
    SOME = "some"
    COMPLETE = "complete"


def count_for(mapping: Mapping[str, Progress], value: Progress) -> int:
    """Count the entries with the given progress, with an explicit loop."""
    count = 0
    for progress in mapping.values():
        if progress == value:
            count += 1
    return count


def count_iterator(mapping: Mapping[str, Progress], value: Progress) -> int:
    """Count the entries with the given progress."""
    return sum(1 for progress in mapping.values() if progress == value)


def count_collection_for(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count the entries with the given progress across maps, with explicit loops."""
    count = 0
    for mapping in collection:
        for progress in mapping.values():
            if progress == value:
                count += 1
    return count


def count_collection_iterator(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count the entries with the given progress across maps."""
    return sum(count_iterator(mapping, value) for mapping in collection)