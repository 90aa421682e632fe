"""Solutions to the trait exercises."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch


@singledispatch
def append_bar(value):
    """Append "Bar" to a string or to a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Something that carries licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    """Software with a numeric version."""

    version_number: int | None = None


@dataclass
class OtherSoftware(Licensed):
    """Software with a textual version."""

    version_number: str | None = None


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Return True when both carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()


class SomeTrait:
    """Provides some_function."""

    def some_function(self) -> bool:
        return True


class OtherTrait:
    """Provides other_function."""

    def other_function(self) -> bool:
        return True


class SomeStruct(SomeTrait, OtherTrait):
    """Has both traits."""


class OtherStruct(SomeTrait, OtherTrait):
    """Has both traits."""


def some_func(item: SomeTrait) -> bool:
    """Return True when both trait functions of the item agree."""
    return item.some_function() and item.other_function()