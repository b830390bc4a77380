from __future__ import annotations

from ...models.commands import MoveCommand
from ...models.enums import CommandName
from .base import CommandHandler, require_no_args


class MoveHandler(CommandHandler):
    commands = (CommandName.MOVE.value,)

    def build(self, parsed, agent: str) -> MoveCommand:
        require_no_args(parsed)
        return MoveCommand(agent=agent)

    def apply(self, board, command: MoveCommand) -> str:
        board.move(command.agent)
        return ""
