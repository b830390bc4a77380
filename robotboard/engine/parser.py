from __future__ import annotations

import re

from ..errors import ParseError
from ..models.commands import ParsedLine

# Split on a run of spaces, or on one comma with optional spaces around it.
_SPLIT = re.compile(r"\s*,\s*|\s+")


def tokenize(raw: str) -> list[str]:
    return _SPLIT.split(raw.strip())


def parse_line(raw: str, *, agent_required: bool = True) -> ParsedLine:
    """Split a command line into command word, arguments and trailing agent name.

    With ``agent_required`` the last token names the agent and a line of a
    single token is rejected. Without it every token after the command is an
    argument and ``agent`` stays ``None``.
    """
    parts = tokenize(raw)
    if len(parts) == 1:
        if agent_required:
            raise ParseError(raw.strip())
        return ParsedLine(command=parts[0])
    if not agent_required:
        return ParsedLine(command=parts[0], args=parts[1:])
    if not parts[-1]:
        raise ParseError(raw.strip(), "empty agent name")
    return ParsedLine(command=parts[0], agent=parts[-1], args=parts[1:-1])
