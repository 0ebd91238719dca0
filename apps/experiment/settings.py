from __future__ import annotations

from typing import Literal

from domain.types import Action, AgentState, GameState
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ExperimentSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PARRY_", extra="ignore")

    trial_duration_ms: int = Field(default=500, gt=0)
    keymap: dict[str, Action] = {"q": "cross", "w": "block", "e": "jab"}
    repetitions: int = Field(default=10, ge=0)
    seed: str = "1234"

    initial_player: AgentState = "neutral"
    initial_opponent: AgentState = "neutral"

    # "guarded" scans the 49 prebuilt units each pass; "direct" looks the state up
    dispatch: Literal["guarded", "direct"] = "guarded"
    reset_between_rounds: bool = False

    renderer: Literal["images", "text"] = "images"
    asset_root: str = "images"

    @property
    def initial_state(self) -> GameState:
        return GameState(self.initial_player, self.initial_opponent)
