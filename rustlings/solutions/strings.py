"""Solutions to the string exercises."""

from __future__ import annotations

_COLOR_WORDS = frozenset({"green", "blue", "red"})


def current_favorite_color() -> str:
    """Return the current favourite colour."""
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    """Return True for the colour words this program knows."""
    return attempt in _COLOR_WORDS


def trim_me(text: str) -> str:
    """Remove whitespace from both ends of the string."""
    return text.strip()


def compose_me(text: str) -> str:
    """Append " world!" to the string."""
    return f"{text} world!"


def replace_me(text: str) -> str:
    """Replace every "cars" with "balloons"."""
    return text.replace("cars", "balloons")