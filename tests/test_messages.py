import pytest

from rustdrill.lessons.messages import ChangeColor, Echo, Move, Point, Quit, State


def test_match_message_call(capsys):
    state = State(quit=False, position=Point(0, 0), color=(0, 0, 0))
    state.process(ChangeColor((255, 0, 255)))
    state.process(Echo("hello world"))
    state.process(Move(Point(10, 15)))
    state.process(Quit())

    assert state.color == (255, 0, 255)
    assert state.position.x == 10
    assert state.position.y == 15
    assert state.quit is True
    assert capsys.readouterr().out == "hello world\n"


def test_defaults_untouched_by_echo(capsys):
    state = State()
    state.process(Echo("hi"))
    assert state == State(color=(0, 0, 0), position=Point(0, 0), quit=False)


def test_unknown_message_raises():
    with pytest.raises(TypeError):
        State().process("jump")