from enum import Enum

Coord = tuple[int, ...]  # one entry per board dimension


class HeadingName(str, Enum):
    NORTH = "NORTH"
    EAST = "EAST"
    SOUTH = "SOUTH"
    WEST = "WEST"


class TurnName(str, Enum):
    LEFT = "LEFT"
    RIGHT = "RIGHT"


class CommandName(str, Enum):
    PLACE = "PLACE"
    MOVE = "MOVE"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    REPORT = "REPORT"


class CommandLogResult(str, Enum):
    APPLIED = "applied"
    ILLEGAL = "illegal"
    ERROR = "error"
