import pytest

from rustlings.solutions.enums import (
    ChangeColor,
    Echo,
    Move,
    Point,
    Quit,
    State,
)


def test_match_message_call():
    state = State(
        quit=False,
        position=Point(x=0, y=0),
        color=(0, 0, 0),
        message="hello world",
    )
    state.process(ChangeColor(255, 0, 255))
    state.process(Echo("Hello world!"))
    state.process(Move(Point(x=10, y=15)))
    state.process(Quit())

    assert state.color == (255, 0, 255)
    assert state.position.x == 10
    assert state.position.y == 15
    assert state.quit is True
    assert state.message == "Hello world!"


def test_unprocessed_fields_unchanged():
    state = State(message="hello world")
    state.process(Echo("changed"))
    assert state.quit is False
    assert state.color == (0, 0, 0)
    assert state.message == "changed"


def test_unknown_message_rejected():
    state = State()
    with pytest.raises(TypeError):
        state.process("Quit")