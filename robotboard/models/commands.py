from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from .enums import CommandLogResult, CommandName, Coord

# ----- Parsed line -----


class ParsedLine(BaseModel):
    command: str
    agent: str | None = None
    args: list[str] = Field(default_factory=list)


# ----- Commands (one per handler) -----


class PlaceCommand(BaseModel):
    kind: CommandName = CommandName.PLACE
    agent: str
    heading: str
    coords: Coord


class MoveCommand(BaseModel):
    kind: CommandName = CommandName.MOVE
    agent: str


class TurnCommand(BaseModel):
    kind: CommandName = CommandName.LEFT
    agent: str

    @property
    def turn(self) -> str:
        return self.kind.value


class ReportCommand(BaseModel):
    kind: CommandName = CommandName.REPORT
    agent: str


Command = PlaceCommand | MoveCommand | TurnCommand | ReportCommand


# ----- Command log -----


class CommandLogEntry(BaseModel):
    ts: datetime = Field(default_factory=datetime.now)
    line: str
    agent: str | None = None
    command: Command | None = None
    result: CommandLogResult = CommandLogResult.APPLIED
    message: str | None = None
    output: str | None = None
