from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

from ..errors import RobotError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .core import CommandEngine


def command_stream(
    engine: CommandEngine,
    stream_in: Iterable[str],
    stream_out: TextIO,
    stream_err: TextIO | None = None,
) -> int:
    """Feed every line of ``stream_in`` to ``engine``.

    Results go to ``stream_out``, command errors to ``stream_err`` (dropped
    when it is None). Errors raised while reading the input propagate.
    Returns the number of lines that failed.
    """
    failed = 0
    for raw in stream_in:
        line = raw.rstrip("\r\n")
        try:
            output = engine.process_line(line)
        except RobotError as e:
            failed += 1
            if stream_err is not None:
                stream_err.write(f"{e}\n")
            continue
        if output:
            stream_out.write(f"{output}\n")
    return failed
