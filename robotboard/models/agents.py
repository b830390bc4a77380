from pydantic import BaseModel

from .directions import Heading
from .enums import Coord


class Agent(BaseModel):
    name: str
    position: Coord | None = None
    heading: Heading | None = None  # shared row of the board's DirectionSet

    @property
    def placed(self) -> bool:
        return self.position is not None and self.heading is not None

    def report(self) -> str:
        coords = ",".join(str(c) for c in self.position or ())
        return f"{coords},{self.heading.name if self.heading else ''}"
