from __future__ import annotations

import os
from typing import Literal

from pydantic import BaseModel, Field

from .engine.board import Board

MAX_X = int(os.getenv("ROBOT_MAX_X", "4"))
MAX_Y = int(os.getenv("ROBOT_MAX_Y", "4"))
ROBOT_COUNT = int(os.getenv("ROBOT_COUNT", "2"))
QUIET = os.getenv("ROBOT_QUIET", "false").lower() in ("1", "true", "yes")
ROBOT_NAME = os.getenv("ROBOT_NAME", "ROBOT")
LOG_LEVEL = os.getenv("ROBOT_LOG_LEVEL", "WARNING").upper()


class BoardConfig(BaseModel):
    max_x: int = Field(default=MAX_X, ge=0)
    max_y: int = Field(default=MAX_Y, ge=0)
    robot_count: int = Field(default=ROBOT_COUNT, ge=0)
    quiet: bool = QUIET
    # agent-less protocol: one robot, addressed implicitly by this name
    single: bool = False
    robot_name: str = Field(default=ROBOT_NAME, min_length=1)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = LOG_LEVEL  # type: ignore[assignment]

    @property
    def expected_agents(self) -> int:
        return 1 if self.single else self.robot_count

    def build_board(self) -> Board:
        return Board.create(self.max_x, self.max_y, self.expected_agents)
