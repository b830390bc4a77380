import pytest

from robotboard.engine.board import Board
from robotboard.engine.core import CommandEngine
from robotboard.events import CommandEvent, event_bus


@pytest.fixture()
def board() -> Board:
    """4x4 board (max 4,4) for a single robot."""
    return Board.create(4, 4, 1)


@pytest.fixture()
def pair_board() -> Board:
    return Board.create(5, 5, 2)


@pytest.fixture()
def engine(board: Board) -> CommandEngine:
    return CommandEngine(board)


@pytest.fixture()
def events():
    """Collect every CommandEvent emitted while the test runs."""
    seen: list[CommandEvent] = []
    event_bus.subscribe(CommandEvent, seen.append)
    try:
        yield seen
    finally:
        event_bus.unsubscribe(CommandEvent, seen.append)

