from __future__ import annotations

from ...models.commands import ReportCommand
from ...models.enums import CommandName
from .base import CommandHandler, require_no_args


class ReportHandler(CommandHandler):
    commands = (CommandName.REPORT.value,)

    def build(self, parsed, agent: str) -> ReportCommand:
        require_no_args(parsed)
        return ReportCommand(agent=agent)

    def apply(self, board, command: ReportCommand) -> str:
        return board.report(command.agent)
