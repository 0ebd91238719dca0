from __future__ import annotations

from typing import Literal

from domain.types import Action, GameState
from pydantic import BaseModel, ConfigDict, Field


class StepRecord(BaseModel):
    """One completed step. Appended to the history and never edited in place."""

    model_config = ConfigDict(frozen=True)

    api: Literal["v1"] = "v1"
    trial_index: int = Field(ge=0)
    repetition: int = Field(ge=1)
    round: int = Field(ge=1)
    action: Action
    state: GameState
    next_state: GameState
    response: str | None = None
    rt: float | None = None  # ms; None on timeout
    time_elapsed: float = 0.0  # ms since session start

    def with_round_bumped(self) -> StepRecord:
        return self.model_copy(update={"round": self.round + 1})
