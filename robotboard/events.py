from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeVar, cast

if TYPE_CHECKING:
    from collections.abc import Callable

    from robotboard.models.commands import Command
    from robotboard.models.enums import CommandLogResult


@dataclass
class CommandEvent:
    line: str
    agent: str | None
    command: Command | None
    result: CommandLogResult
    message: str | None = None
    output: str | None = None


T = TypeVar("T")


class EventBus:
    def __init__(self) -> None:
        self._subs: dict[type[Any], list[object]] = {}

    def subscribe(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        lst = self._subs.setdefault(event_type, [])
        if handler not in lst:
            lst.append(cast("object", handler))

    def unsubscribe(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        lst = self._subs.get(event_type, [])
        if handler in lst:
            lst.remove(handler)

    def emit(self, event: Any) -> None:
        et = type(event)
        for h in self._subs.get(et, []):
            # Let exceptions propagate; callers decide how to handle them
            cast("Callable[[Any], None]", h)(event)


event_bus = EventBus()
