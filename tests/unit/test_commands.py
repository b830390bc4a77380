import pytest

from robotboard.engine.actions import default_registry
from robotboard.engine.board import Board
from robotboard.engine.core import CommandEngine
from robotboard.errors import BadArguments, ParseError, RobotError, UnknownCommand
from robotboard.models.commands import MoveCommand, PlaceCommand, ReportCommand, TurnCommand
from robotboard.models.enums import CommandLogResult, CommandName


class CaptureBoard:
    """Records calls instead of enforcing any rules."""

    def __init__(self):
        self.calls: list[str] = []

    def place(self, name, heading, *coords):
        self.calls.append(f"PLACE {list(coords)} {heading}")

    def move(self, name):
        self.calls.append("MOVE")

    def turn(self, name, turn):
        self.calls.append(turn)

    def report(self, name):
        self.calls.append("REPORT")
        return "FAKE"


def test_dispatch_valid_lines():
    board = CaptureBoard()
    eng = CommandEngine(board)  # type: ignore[arg-type]
    for line in [
        "PLACE 1,1,NORTH FOO",
        "PLACE 1,NORTH FOO",
        "PLACE 1,1,1,NORTH FOO",
        "MOVE FOO",
        "REPORT FOO",
        "LEFT FOO",
    ]:
        eng.process_line(line)
    assert board.calls == [
        "PLACE [1, 1] NORTH",
        "PLACE [1] NORTH",
        "PLACE [1, 1, 1] NORTH",
        "MOVE",
        "REPORT",
        "LEFT",
    ]


@pytest.mark.parametrize(
    "line, error",
    [
        # Two tokens parse fine (command + agent); PLACE then rejects the
        # missing coordinates and heading at dispatch, not at parse time.
        ("PLACE FOO", BadArguments),
        ("PLACE NORTH FOO", BadArguments),
        ("PLACE A,1,NORTH FOO", BadArguments),
        ("PLACE 1.5,1,NORTH FOO", BadArguments),
        ("MOVE 1 FOO", BadArguments),
        ("REPORT SOMETHING FOO", BadArguments),
        ("LEFT 1 FOO", BadArguments),
        ("RIGHT 1 FOO", BadArguments),
        ("FOOBAR FOO", UnknownCommand),
        ("MOVE", ParseError),
    ],
)
def test_dispatch_rejects(line, error):
    board = CaptureBoard()
    eng = CommandEngine(board)  # type: ignore[arg-type]
    with pytest.raises(error):
        eng.process_line(line)
    assert board.calls == []


def test_bad_coordinate_names_position():
    eng = CommandEngine(CaptureBoard())  # type: ignore[arg-type]
    with pytest.raises(BadArguments) as exc:
        eng.process_line("PLACE 1,x,NORTH FOO")
    assert exc.value.index == 1
    assert "parsing parameter 1" in str(exc.value)


def test_unknown_command_message():
    eng = CommandEngine(Board.create(4, 4, 1))
    with pytest.raises(UnknownCommand) as exc:
        eng.process_line("ERROR FOO")
    assert str(exc.value) == "No such command 'ERROR'"
    assert exc.value.token == "ERROR"


def test_argument_messages():
    eng = CommandEngine(Board.create(4, 4, 1))
    with pytest.raises(BadArguments) as exc:
        eng.process_line("PLACE FOO")
    assert str(exc.value) == "PLACE requires at least 2 arguments"
    with pytest.raises(BadArguments) as exc:
        eng.process_line("RIGHT 1 FOO")
    assert str(exc.value) == "RIGHT does not take any arguments"


def test_build_typed_commands():
    eng = CommandEngine(Board.create(4, 4, 1))
    cmd = eng.build(eng.parse("PLACE -1,+2,EAST r1"))
    assert cmd == PlaceCommand(agent="r1", heading="EAST", coords=(-1, 2))
    assert isinstance(eng.build(eng.parse("MOVE r1")), MoveCommand)
    assert isinstance(eng.build(eng.parse("REPORT r1")), ReportCommand)
    turn = eng.build(eng.parse("RIGHT r1"))
    assert isinstance(turn, TurnCommand)
    assert turn.turn == "RIGHT"


def test_negative_coordinate_reaches_board():
    eng = CommandEngine(Board.create(4, 4, 1))
    with pytest.raises(RobotError) as exc:
        eng.process_line("PLACE -1,2,EAST FOO")
    assert str(exc.value) == "Robot would fall"


def test_registry_covers_every_command():
    reg = default_registry()
    assert set(reg) == {c.value for c in CommandName}
    assert reg["LEFT"] is reg["RIGHT"]


def test_example_session(engine):
    for line in ["PLACE 1,2,EAST FOO", "MOVE FOO", "MOVE FOO", "LEFT FOO", "MOVE FOO"]:
        assert engine.process_line(line) == ""
    assert engine.process_line("REPORT FOO") == "3,3,NORTH"


def test_single_robot_mode():
    eng = CommandEngine(Board.create(4, 4, 1), default_agent="ROBOT")
    eng.process_line("PLACE 0,0,NORTH")
    eng.process_line("MOVE")
    eng.process_line("RIGHT")
    assert eng.process_line("REPORT") == "0,1,EAST"
    assert eng.board.agent("ROBOT") is not None


def test_events_emitted(engine, events):
    engine.process_line("PLACE 0,0,NORTH FOO")
    with pytest.raises(RobotError):
        engine.process_line("MOVE BAR")
    engine.process_line("REPORT FOO")

    assert [e.result for e in events] == [
        CommandLogResult.APPLIED,
        CommandLogResult.ILLEGAL,
        CommandLogResult.APPLIED,
    ]
    assert events[0].agent == "FOO"
    assert isinstance(events[0].command, PlaceCommand)
    assert events[1].agent == "BAR"
    assert events[1].message == "Robot not placed"
    assert events[2].output == "0,0,NORTH"


def test_oversized_coordinate_is_bad_argument():
    eng = CommandEngine(Board.create(4, 4, 1))
    with pytest.raises(BadArguments) as exc:
        eng.process_line("PLACE " + "1" * 5000 + ",0,NORTH FOO")
    assert exc.value.index == 0
    eng.process_line("PLACE 0,0,NORTH FOO")
    assert eng.process_line("REPORT FOO") == "0,0,NORTH"


def test_coordinate_beyond_64_bits_is_bad_argument():
    eng = CommandEngine(Board.create(4, 4, 1))
    with pytest.raises(BadArguments) as exc:
        eng.process_line(f"PLACE 0,{2**63},NORTH FOO")
    assert exc.value.index == 1
    assert "out of range" in str(exc.value)
