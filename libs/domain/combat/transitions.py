"""Combat transition table.

Maps a (player, opponent, action) triple to the next GameState. A modeled
triple resolves either to a fixed pair or to a uniform pick between two
candidate pairs; every other triple resets both sides to neutral.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TypeAlias

from domain.types import RESET_STATE, Action, AgentState, GameState
from ports.random import RandomSourcePort

Triple: TypeAlias = tuple[AgentState, AgentState, Action]


@dataclass(frozen=True)
class Fixed:
    result: GameState

    @property
    def candidates(self) -> tuple[GameState, ...]:
        return (self.result,)

    def resolve(self, rng: RandomSourcePort) -> GameState:
        return self.result


@dataclass(frozen=True)
class Choice:
    """Two equally likely results; resolving costs exactly one draw."""

    candidates: tuple[GameState, GameState]

    def resolve(self, rng: RandomSourcePort) -> GameState:
        return rng.pick_one(self.candidates)


Outcome: TypeAlias = Fixed | Choice


def _fixed(player: AgentState, opponent: AgentState) -> Fixed:
    return Fixed(GameState(player, opponent))


def _choice(
    first: tuple[AgentState, AgentState], second: tuple[AgentState, AgentState]
) -> Choice:
    return Choice((GameState(*first), GameState(*second)))


TRANSITIONS: Mapping[Triple, Outcome] = {
    # both idle
    ("neutral", "neutral", "none"): _choice(("neutral", "block"), ("neutral", "windup")),
    ("neutral", "neutral", "jab"): _choice(("combo", "block"), ("combo", "hit1")),
    ("neutral", "neutral", "cross"): _choice(("combo2", "hit2"), ("hit1", "combo")),
    ("neutral", "neutral", "block"): _choice(("block", "block"), ("block", "windup")),
    # opponent guarding
    ("neutral", "block", "none"): _choice(("neutral", "neutral"), ("neutral", "windup")),
    ("neutral", "block", "jab"): _fixed("combo", "block"),
    ("neutral", "block", "cross"): _fixed("combo2", "block"),
    ("neutral", "block", "block"): _fixed("neutral", "neutral"),
    # opponent winding up
    ("neutral", "windup", "none"): _fixed("hit1", "combo"),
    ("neutral", "windup", "cross"): _fixed("hit1", "combo"),
    ("neutral", "windup", "jab"): _choice(("combo", "hit1"), ("hit1", "combo")),
    ("neutral", "windup", "block"): _choice(("block", "combo"), ("block", "combo2")),
    # player mid-combo
    ("combo", "block", "block"): _fixed("block", "combo"),
    ("combo", "block", "jab"): _choice(("combo2", "block"), ("hit1", "combo")),
    ("combo", "block", "cross"): _fixed("hit1", "combo"),
    ("combo", "hit1", "cross"): _fixed("combo2", "hit2"),
    ("combo", "hit1", "block"): _fixed("block", "neutral"),
    # NOTE: a player in hit1/hit2 facing a combo has no rows and resets like
    # any other unlisted triple.
}


def outcome_for(player: AgentState, opponent: AgentState, action: Action) -> Outcome | None:
    return TRANSITIONS.get((player, opponent, action))


def is_modeled(player: AgentState, opponent: AgentState, action: Action) -> bool:
    return (player, opponent, action) in TRANSITIONS


def possible_results(
    player: AgentState, opponent: AgentState, action: Action
) -> tuple[GameState, ...]:
    """Every GameState `transition` can return for this triple."""
    outcome = outcome_for(player, opponent, action)
    if outcome is None:
        return (RESET_STATE,)
    return outcome.candidates


def transition(
    player: AgentState, opponent: AgentState, action: Action, rng: RandomSourcePort
) -> GameState:
    """
    Next GameState for one step. Total over all 196 triples: anything not in
    TRANSITIONS resets to neutral/neutral. `rng` is drawn from only when the
    triple has two candidates, so the draw sequence follows the path taken.
    """
    outcome = outcome_for(player, opponent, action)
    if outcome is None:
        return RESET_STATE
    return outcome.resolve(rng)
