"""Robots on a bounded grid, driven by line-oriented text commands."""

from .engine.board import Board
from .engine.core import CommandEngine
from .engine.parser import parse_line
from .engine.stream import command_stream
from .models.directions import DIRECTIONS_2D, DirectionSet, Heading

__all__ = [
    "DIRECTIONS_2D",
    "Board",
    "CommandEngine",
    "DirectionSet",
    "Heading",
    "command_stream",
    "parse_line",
]
