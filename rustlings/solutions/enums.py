"""Solutions to the enum exercises: messages and a state that processes them."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Point:
    """A position on a grid."""

    x: int
    y: int


@dataclass(frozen=True)
class Move:
    """Move to a point."""

    point: Point


@dataclass(frozen=True)
class Echo:
    """Set the message text."""

    text: str


@dataclass(frozen=True)
class ChangeColor:
    """Change the colour."""

    red: int
    green: int
    blue: int


@dataclass(frozen=True)
class Quit:
    """Ask to quit."""


Message = Move | Echo | ChangeColor | Quit


@dataclass
class State:
    """State changed by processing messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False
    message: str = ""

    def process(self, message: Message) -> None:
        """Apply a message to the state."""
        match message:
            case ChangeColor(red=red, green=green, blue=blue):
                self.color = (red, green, blue)
            case Echo(text=text):
                self.message = text
            case Move(point=point):
                self.position = point
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"unknown message: {message!r}")