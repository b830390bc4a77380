from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .enums import Coord, HeadingName, TurnName


class Heading(BaseModel):
    """A named facing: the step taken when moving forward and where each turn leads."""

    model_config = ConfigDict(frozen=True)

    name: str
    forward: Coord
    # turn command -> index of the resulting heading in the owning DirectionSet
    turns: dict[str, int] = Field(default_factory=dict)


class DirectionSet(BaseModel):
    """Immutable table of headings whose turn entries point back into the same table."""

    model_config = ConfigDict(frozen=True)

    headings: tuple[Heading, ...]

    @model_validator(mode="after")
    def _check_closed(self) -> DirectionSet:
        n = len(self.headings)
        if n == 0:
            raise ValueError("a direction set needs at least one heading")
        names = [h.name for h in self.headings]
        if len(set(names)) != n:
            raise ValueError(f"duplicate heading names: {names}")
        if len({len(h.forward) for h in self.headings}) != 1:
            raise ValueError("all forward vectors must have the same dimension")
        turn_names = set(self.headings[0].turns)
        for h in self.headings:
            if set(h.turns) != turn_names:
                raise ValueError(f"heading {h.name} does not define turns {sorted(turn_names)}")
            for turn, idx in h.turns.items():
                if not 0 <= idx < n:
                    raise ValueError(f"turn {turn} from {h.name} points outside the table")
        # Repeating one turn must walk every heading once and come back.
        for turn in turn_names:
            idx, seen = 0, set()
            for _ in range(n):
                seen.add(idx)
                idx = self.headings[idx].turns[turn]
            if idx != 0 or len(seen) != n:
                raise ValueError(f"turn {turn} does not cycle through all headings")
        return self

    @classmethod
    def ring(
        cls,
        headings: Iterable[tuple[str, Iterable[int]]],
        *,
        left: str = TurnName.LEFT.value,
        right: str = TurnName.RIGHT.value,
    ) -> DirectionSet:
        """Build a cyclic set: ``right`` steps to the next heading, ``left`` to the previous."""
        items = [(name, tuple(fwd)) for name, fwd in headings]
        n = len(items)
        return cls(
            headings=tuple(
                Heading(
                    name=name,
                    forward=fwd,
                    turns={left: (i + n - 1) % n, right: (i + 1) % n},
                )
                for i, (name, fwd) in enumerate(items)
            )
        )

    @property
    def dimensions(self) -> int:
        return len(self.headings[0].forward)

    @property
    def turn_names(self) -> frozenset[str]:
        return frozenset(self.headings[0].turns)

    def get(self, name: str) -> Heading | None:
        return next((h for h in self.headings if h.name == name), None)

    def turn(self, heading: Heading, turn: str) -> Heading | None:
        idx = heading.turns.get(turn)
        return None if idx is None else self.headings[idx]


DIRECTIONS_2D = DirectionSet.ring(
    [
        (HeadingName.NORTH.value, (0, 1)),
        (HeadingName.EAST.value, (1, 0)),
        (HeadingName.SOUTH.value, (0, -1)),
        (HeadingName.WEST.value, (-1, 0)),
    ]
)
