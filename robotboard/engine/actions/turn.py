from __future__ import annotations

from ...models.commands import TurnCommand
from ...models.enums import CommandName
from .base import CommandHandler, require_no_args


class TurnHandler(CommandHandler):
    """LEFT and RIGHT: the command word doubles as the turn name."""

    commands = (CommandName.LEFT.value, CommandName.RIGHT.value)

    def build(self, parsed, agent: str) -> TurnCommand:
        require_no_args(parsed)
        return TurnCommand(kind=CommandName(parsed.command), agent=agent)

    def apply(self, board, command: TurnCommand) -> str:
        board.turn(command.agent, command.turn)
        return ""
