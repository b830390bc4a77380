from __future__ import annotations

from typing import TYPE_CHECKING

from ...events import CommandEvent, event_bus
from ...models.enums import CommandLogResult

if TYPE_CHECKING:
    from ...models.commands import Command


def log_event(
    line: str,
    agent: str | None,
    command: Command | None,
    result: CommandLogResult,
    message: str | None = None,
    output: str | None = None,
) -> None:
    event_bus.emit(
        CommandEvent(
            line=line,
            agent=agent,
            command=command,
            result=result,
            message=message,
            output=output or None,
        )
    )


def log_illegal(
    line: str, agent: str | None, command: Command | None, error: Exception
) -> None:
    log_event(line, agent, command, CommandLogResult.ILLEGAL, str(error))


def log_error(
    line: str, agent: str | None, command: Command | None, error: Exception
) -> None:
    log_event(line, agent, command, CommandLogResult.ERROR, repr(error))
