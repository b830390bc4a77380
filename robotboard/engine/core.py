from __future__ import annotations

from typing import TYPE_CHECKING

from ..errors import ParseError, RobotError, UnknownCommand
from ..models.enums import CommandLogResult
from .actions import default_registry
from .logging.logger import log_error, log_event, log_illegal
from .parser import parse_line

if TYPE_CHECKING:
    from ..models.commands import Command, ParsedLine
    from .actions import Registry
    from .board import Board


class CommandEngine:
    """Turns text lines into board operations.

    ``default_agent`` switches to the agent-less protocol: lines carry no
    trailing agent name and every command addresses that one agent.
    """

    def __init__(
        self,
        board: Board,
        handlers: Registry | None = None,
        *,
        default_agent: str | None = None,
    ):
        self.board = board
        self.handlers: Registry = handlers or default_registry()
        self.default_agent = default_agent

    def parse(self, line: str) -> ParsedLine:
        return parse_line(line, agent_required=self.default_agent is None)

    def build(self, parsed: ParsedLine) -> Command:
        h = self.handlers.get(parsed.command)
        if not h:
            raise UnknownCommand(parsed.command)
        agent = parsed.agent if parsed.agent is not None else self.default_agent
        if agent is None:
            raise ParseError(parsed.command)
        return h.build(parsed, agent)

    def apply(self, command: Command) -> str:
        return self.handlers[command.kind.value].apply(self.board, command)

    def process_line(self, line: str) -> str:
        """Run one command line; returns its output ('' unless REPORT)."""
        parsed = None
        command = None
        try:
            parsed = self.parse(line)
            command = self.build(parsed)
            output = self.apply(command)
        except RobotError as e:
            log_illegal(line, self._agent_of(parsed), command, e)
            raise
        except Exception as e:
            log_error(line, self._agent_of(parsed), command, e)
            raise
        log_event(line, command.agent, command, CommandLogResult.APPLIED, output=output)
        return output

    def _agent_of(self, parsed: ParsedLine | None) -> str | None:
        if parsed is None:
            return None
        return parsed.agent if parsed.agent is not None else self.default_agent
