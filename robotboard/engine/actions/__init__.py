"""Command handlers, one per command word (LEFT and RIGHT share one)."""

from .base import CommandHandler, Registry
from .move import MoveHandler
from .place import PlaceHandler
from .report import ReportHandler
from .turn import TurnHandler


def default_registry() -> Registry:
    reg: Registry = {}
    for h in (PlaceHandler(), MoveHandler(), TurnHandler(), ReportHandler()):
        for name in h.commands:
            reg[name] = h
    return reg


__all__ = [
    "CommandHandler",
    "MoveHandler",
    "PlaceHandler",
    "Registry",
    "ReportHandler",
    "TurnHandler",
    "default_registry",
]
