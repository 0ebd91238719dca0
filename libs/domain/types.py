from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, get_args

AgentState = Literal["neutral", "block", "windup", "hit1", "hit2", "combo", "combo2"]
Action = Literal["none", "jab", "cross", "block"]

# enumeration order is also the dispatch-table order
AGENT_STATES: tuple[AgentState, ...] = get_args(AgentState)
ACTIONS: tuple[Action, ...] = get_args(Action)

TERMINAL_STATE: AgentState = "combo2"


@dataclass(frozen=True)
class GameState:
    player: AgentState
    opponent: AgentState

    def as_tuple(self) -> tuple[AgentState, AgentState]:
        return self.player, self.opponent

    def __str__(self) -> str:
        return f"{self.player}/{self.opponent}"


INITIAL_STATE = GameState("neutral", "neutral")
RESET_STATE = GameState("neutral", "neutral")


def is_terminal(state: GameState) -> bool:
    """A round ends once either side lands the final combo stage."""
    return state.player == TERMINAL_STATE or state.opponent == TERMINAL_STATE
