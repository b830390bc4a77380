from __future__ import annotations

import re

from ...errors import BadArguments
from ...models.commands import PlaceCommand
from ...models.enums import CommandName
from .base import CommandHandler

_INT = re.compile(r"[+-]?[0-9]+")
_MIN, _MAX = -(2**63), 2**63 - 1


def parse_coord(raw: str, idx: int) -> int:
    if not _INT.fullmatch(raw):
        raise BadArguments(
            CommandName.PLACE.value, f"invalid integer '{raw}'", index=idx
        )
    try:
        value = int(raw, 10)
    except ValueError as e:
        raise BadArguments(CommandName.PLACE.value, str(e), index=idx) from e
    if not _MIN <= value <= _MAX:
        raise BadArguments(
            CommandName.PLACE.value, f"value out of range '{raw}'", index=idx
        )
    return value


class PlaceHandler(CommandHandler):
    """PLACE <c0> [<c1> ...] <HEADING>: coordinates first, heading last."""

    commands = (CommandName.PLACE.value,)

    def build(self, parsed, agent: str) -> PlaceCommand:
        if len(parsed.args) < 2:
            raise BadArguments(parsed.command, "requires at least 2 arguments")
        *raw_coords, heading = parsed.args
        coords = tuple(parse_coord(raw, i) for i, raw in enumerate(raw_coords))
        return PlaceCommand(agent=agent, heading=heading, coords=coords)

    def apply(self, board, command: PlaceCommand) -> str:
        board.place(command.agent, command.heading, *command.coords)
        return ""
