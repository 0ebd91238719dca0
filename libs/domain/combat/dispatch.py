"""Pre-built guarded units, one per (player, opponent) pair.

Hosts that can only run a fixed, non-branching sequence of units scan this
table every pass and run whichever unit reports itself active. Hosts that can
branch should use `DispatchTable.unit_for` on the current state instead.
"""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field

from domain.types import AGENT_STATES, INITIAL_STATE, GameState
from ports.render import Stimulus, StimulusRendererPort
from shared.contracts.v1.step import StepRecord

LastRecordFn = Callable[[], StepRecord | None]


def state_after(record: StepRecord | None, initial: GameState = INITIAL_STATE) -> GameState:
    """The state the next step starts in."""
    return record.next_state if record is not None else initial


@dataclass(frozen=True)
class GuardedUnit:
    state: GameState
    stimulus: Stimulus
    predicate: Callable[[], bool] = field(repr=False, compare=False)

    def is_active(self) -> bool:
        return self.predicate()


class DispatchTable:
    def __init__(self, units: tuple[GuardedUnit, ...], fallback: GuardedUnit) -> None:
        self.units = units
        self.fallback = fallback
        self._by_state: Mapping[GameState, GuardedUnit] = {u.state: u for u in units}

    def __len__(self) -> int:
        return len(self.units)

    def __iter__(self) -> Iterator[GuardedUnit]:
        return iter(self.units)

    def unit_for(self, state: GameState) -> GuardedUnit:
        return self._by_state[state]

    def active_units(self) -> list[GuardedUnit]:
        return [u for u in self.units if u.is_active()]

    def scan(self) -> Iterator[GuardedUnit]:
        """
        One pass in table order. Each predicate is checked only when the scan
        reaches it, so a unit run earlier in the pass can activate a later one.
        Yields the fallback unit if the whole pass matched nothing.
        """
        matched = False
        for unit in self.units:
            if unit.is_active():
                matched = True
                yield unit
        if not matched:
            yield self.fallback


def _guard(state: GameState, last_record: LastRecordFn, initial: GameState) -> Callable[[], bool]:
    def is_active() -> bool:
        return state_after(last_record(), initial) == state

    return is_active


def build_dispatch_table(
    renderer: StimulusRendererPort,
    last_record: LastRecordFn,
    initial: GameState = INITIAL_STATE,
) -> DispatchTable:
    units = tuple(
        GuardedUnit(
            state=GameState(player, opponent),
            stimulus=renderer.render(player, opponent),
            predicate=_guard(GameState(player, opponent), last_record, initial),
        )
        for player, opponent in itertools.product(AGENT_STATES, AGENT_STATES)
    )
    fallback = next(u for u in units if u.state == initial)
    return DispatchTable(units, fallback)
