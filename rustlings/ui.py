"""Terminal styling and the warning and success messages shown to the user."""

from __future__ import annotations

import os
import sys

_RESET = "\x1b[0m"


def _colors_enabled() -> bool:
    if os.environ.get("CLICOLOR_FORCE", "0") != "0":
        return True
    if os.environ.get("CLICOLOR") == "0":
        return False
    return sys.stdout.isatty()


def _style(text: object, code: str) -> str:
    if _colors_enabled():
        return f"\x1b[{code}m{text}{_RESET}"
    return str(text)


def no_emoji() -> bool:
    """Return True when the user asked for output without emoji."""
    return "NO_EMOJI" in os.environ


def bold(text: object) -> str:
    """Return ``text`` in bold when colours are enabled."""
    return _style(text, "1")


def red(text: object) -> str:
    """Return ``text`` in red when colours are enabled."""
    return _style(text, "31")


def green(text: object) -> str:
    """Return ``text`` in green when colours are enabled."""
    return _style(text, "32")


def blue(text: object) -> str:
    """Return ``text`` in blue when colours are enabled."""
    return _style(text, "34")


def warn(message: str) -> None:
    """Print a warning line in red."""
    marker = "!" if no_emoji() else "⚠️ "
    print(f"{red(marker)} {red(message)}")


def success(message: str) -> None:
    """Print a success line in green."""
    marker = "✓" if no_emoji() else "✅"
    print(f"{green(marker)} {green(message)}")