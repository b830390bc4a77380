from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from ...errors import BadArguments

if TYPE_CHECKING:
    from ...models.commands import Command, ParsedLine
    from ..board import Board


class CommandHandler(Protocol):
    commands: tuple[str, ...]

    def build(self, parsed: ParsedLine, agent: str) -> Command: ...

    def apply(self, board: Board, command: Command) -> str: ...


Registry = dict[str, CommandHandler]


def require_no_args(parsed: ParsedLine) -> None:
    if parsed.args:
        raise BadArguments(parsed.command, "does not take any arguments")
