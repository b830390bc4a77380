from __future__ import annotations

import threading
from typing import Any

from pydantic import BaseModel, Field, PrivateAttr, model_validator

from ..errors import (
    Collision,
    DimensionMismatch,
    InvalidDirection,
    InvalidTurn,
    NotAllPlaced,
    NotPlaced,
    TooManyAgents,
    WouldFall,
)
from ..models.agents import Agent
from ..models.directions import DIRECTIONS_2D, DirectionSet
from ..models.enums import Coord


class Board(BaseModel):
    """Bounded grid holding a fixed roster of named agents.

    Coordinates run from 0 to ``max[i]`` inclusive in every dimension. Agents
    join the roster on their first successful placement; moving, turning and
    reporting are refused until ``expected_agents`` of them are on the board.
    """

    max: Coord
    expected_agents: int = Field(default=1, ge=0)
    directions: DirectionSet = Field(default_factory=lambda: DIRECTIONS_2D)
    agents: dict[str, Agent] = Field(default_factory=dict)

    _lock = PrivateAttr(default_factory=threading.Lock)

    @model_validator(mode="after")
    def _check_shape(self) -> Board:
        if any(m < 0 for m in self.max):
            raise ValueError(f"board maximum must be non-negative, got {self.max}")
        if self.directions.dimensions != len(self.max):
            raise ValueError(
                f"direction set is {self.directions.dimensions}-dimensional, "
                f"board is {len(self.max)}-dimensional"
            )
        return self

    @classmethod
    def create(cls, max_x: int, max_y: int, expected_agents: int) -> Board:
        return cls(max=(max_x, max_y), expected_agents=expected_agents)

    @property
    def dimensions(self) -> int:
        return len(self.max)

    @property
    def placed_count(self) -> int:
        return sum(1 for a in self.agents.values() if a.placed)

    @property
    def accepting_movements(self) -> bool:
        return self.placed_count == self.expected_agents

    def agent(self, name: str) -> Agent | None:
        return self.agents.get(name)

    # ----- checks -----

    def _in_bounds(self, pos: Coord) -> bool:
        return all(0 <= c <= m for c, m in zip(pos, self.max))

    def _occupant(self, pos: Coord, ignore: str | None = None) -> Agent | None:
        for a in self.agents.values():
            if ignore is not None and a.name == ignore:
                continue
            if a.placed and a.position == pos:
                return a
        return None

    def _acting(self, name: str) -> Agent:
        if not self.accepting_movements:
            raise NotAllPlaced(self.placed_count, self.expected_agents)
        a = self.agents.get(name)
        if not a or not a.placed:
            raise NotPlaced(name)
        return a

    # ----- operations -----

    def place(self, name: str, heading: str, *coords: int) -> None:
        pos = tuple(coords)
        if len(pos) != self.dimensions:
            raise DimensionMismatch(self.dimensions, len(pos))
        # Upper bound first, then the lower bound.
        if any(c > m for c, m in zip(pos, self.max)):
            raise WouldFall(name, pos)
        if any(c < 0 for c in pos):
            raise WouldFall(name, pos)
        h = self.directions.get(heading)
        if h is None:
            raise InvalidDirection(heading)
        with self._lock:
            other = self._occupant(pos, ignore=name)
            if other:
                raise Collision(name, other.name, pos)
            a = self.agents.get(name)
            if a is None:
                if len(self.agents) >= self.expected_agents:
                    raise TooManyAgents(name, self.expected_agents)
                self.agents[name] = Agent(name=name, position=pos, heading=h)
                return
            a.position = pos
            a.heading = h

    def move(self, name: str) -> Coord:
        with self._lock:
            a = self._acting(name)
            new_pos = tuple(c + d for c, d in zip(a.position, a.heading.forward))
            if not self._in_bounds(new_pos):
                raise WouldFall(name, new_pos)
            other = self._occupant(new_pos, ignore=name)
            if other:
                raise Collision(name, other.name, new_pos)
            a.position = new_pos
            return new_pos

    def turn(self, name: str, turn: str) -> str:
        with self._lock:
            a = self._acting(name)
            h = self.directions.turn(a.heading, turn)
            if h is None:
                raise InvalidTurn(turn)
            a.heading = h
            return h.name

    def report(self, name: str) -> str:
        with self._lock:
            return self._acting(name).report()

    def to_serializable(self) -> dict[str, Any]:
        with self._lock:
            return self.model_dump(exclude={"directions"})
