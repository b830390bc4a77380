"""Error taxonomy for command handling.

Every error is a local validation failure: the command loop reports it and
moves on to the next line. Each class keeps the offending values as
attributes; ``str(err)`` renders the message.
"""

from __future__ import annotations


class RobotError(Exception):
    """Base class for every recoverable command failure."""

    def message(self) -> str:
        return "Invalid command"

    def __str__(self) -> str:
        return self.message()


class ParseError(RobotError):
    def __init__(self, raw: str, reason: str = "agent name required") -> None:
        super().__init__(raw, reason)
        self.raw = raw
        self.reason = reason

    def message(self) -> str:
        return f"Cannot parse '{self.raw}': {self.reason}"


class UnknownCommand(RobotError):
    def __init__(self, token: str) -> None:
        super().__init__(token)
        self.token = token

    def message(self) -> str:
        return f"No such command '{self.token}'"


class BadArguments(RobotError):
    def __init__(self, command: str, reason: str, index: int | None = None) -> None:
        super().__init__(command, reason, index)
        self.command = command
        self.reason = reason
        self.index = index

    def message(self) -> str:
        if self.index is not None:
            return f"{self.command}: parsing parameter {self.index}: {self.reason}"
        return f"{self.command} {self.reason}"


class DimensionMismatch(RobotError):
    def __init__(self, expected: int, got: int) -> None:
        super().__init__(expected, got)
        self.expected = expected
        self.got = got

    def message(self) -> str:
        return (
            f"Wrong number of coordinates: got {self.got}, "
            f"please provide {self.expected} coordinate values"
        )


class InvalidDirection(RobotError):
    def __init__(self, direction: str) -> None:
        super().__init__(direction)
        self.direction = direction

    def message(self) -> str:
        return f"Invalid direction '{self.direction}' for this dimension"


class InvalidTurn(RobotError):
    def __init__(self, turn: str) -> None:
        super().__init__(turn)
        self.turn = turn

    def message(self) -> str:
        return f"Invalid turn direction '{self.turn}'"


class WouldFall(RobotError):
    def __init__(self, agent: str, position: tuple[int, ...]) -> None:
        super().__init__(agent, position)
        self.agent = agent
        self.position = position

    def message(self) -> str:
        return "Robot would fall"


class Collision(RobotError):
    def __init__(self, agent: str, other: str, position: tuple[int, ...]) -> None:
        super().__init__(agent, other, position)
        self.agent = agent
        self.other = other
        self.position = position

    def message(self) -> str:
        return "Robot would collide"


class NotPlaced(RobotError):
    def __init__(self, agent: str) -> None:
        super().__init__(agent)
        self.agent = agent

    def message(self) -> str:
        return "Robot not placed"


class NotAllPlaced(RobotError):
    def __init__(self, placed: int, expected: int) -> None:
        super().__init__(placed, expected)
        self.placed = placed
        self.expected = expected

    def message(self) -> str:
        return f"Not all robots placed ({self.placed} of {self.expected})"


class TooManyAgents(RobotError):
    def __init__(self, agent: str, expected: int) -> None:
        super().__init__(agent, expected)
        self.agent = agent
        self.expected = expected

    def message(self) -> str:
        return f"Too many robots: the board takes {self.expected}"
