from __future__ import annotations

import logging

from .events import CommandEvent, event_bus
from .models.commands import CommandLogEntry
from .models.enums import CommandLogResult

logger = logging.getLogger("robotboard.commands")

_LEVELS = {
    CommandLogResult.APPLIED: logging.DEBUG,
    CommandLogResult.ILLEGAL: logging.INFO,
    CommandLogResult.ERROR: logging.ERROR,
}


def _on_command_event(ev: CommandEvent) -> None:
    level = _LEVELS[ev.result]
    if not logger.isEnabledFor(level):
        return
    entry = CommandLogEntry(
        line=ev.line,
        agent=ev.agent,
        command=ev.command,
        result=ev.result,
        message=ev.message,
        output=ev.output,
    )
    logger.log(level, "%s", entry.model_dump_json(exclude_none=True))


def register_listeners() -> None:
    event_bus.subscribe(CommandEvent, _on_command_event)
