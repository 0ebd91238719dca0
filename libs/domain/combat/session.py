# libs/domain/combat/session.py
from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Final, Literal

from domain.types import INITIAL_STATE, Action, GameState
from ports.history import HistoryPort
from ports.input import KeyResponsePort, ResponseStreamClosed
from ports.random import RandomSourcePort
from ports.render import Stimulus, StimulusRendererPort
from ports.time import ClockPort
from shared.contracts.v1.step import StepRecord

from .dispatch import DispatchTable, GuardedUnit, build_dispatch_table, state_after
from .keymap import DEFAULT_KEYMAP, map_key, response_keys
from .rounds import RoundController
from .transitions import transition

LOG: Final = logging.getLogger("parry.session")

DispatchMode = Literal["guarded", "direct"]


@dataclass(frozen=True)
class PendingStep:
    """A stimulus on screen, waiting for its response."""

    unit: GuardedUnit
    repetition: int
    onset: float  # clock seconds

    @property
    def state(self) -> GameState:
        return self.unit.state

    @property
    def stimulus(self) -> Stimulus:
        return self.unit.stimulus


class CombatSession:
    """
    Pure step driver (no OS calls). Hosts either pull steps with
    present()/complete() or hand over a KeyResponsePort to run().
    """

    def __init__(
        self,
        renderer: StimulusRendererPort,
        rng: RandomSourcePort,
        history: HistoryPort,
        clock: ClockPort,
        *,
        keymap: Mapping[str, Action] = DEFAULT_KEYMAP,
        repetitions: int = 10,
        trial_duration_ms: int = 500,
        initial_state: GameState = INITIAL_STATE,
        dispatch: DispatchMode = "guarded",
        reset_between_rounds: bool = False,
    ) -> None:
        if dispatch not in ("guarded", "direct"):
            raise ValueError(f"Unknown dispatch mode: {dispatch!r}")
        self.rng: Final = rng
        self.history: Final = history
        self.clock: Final = clock
        self.keymap: Final = dict(keymap)
        self.trial_duration_ms = int(trial_duration_ms)
        self.initial_state: Final = initial_state
        self.dispatch: Final = dispatch
        self.reset_between_rounds: Final = reset_between_rounds

        self.rounds = RoundController(history, repetitions)
        self.table: DispatchTable = build_dispatch_table(
            renderer, self._last_record, initial_state
        )
        self.current_state = initial_state
        self.repetition = 0

        self._round_start = len(history)
        self._started_at = clock.now()
        self._pending: PendingStep | None = None
        self._units = self._timeline()

    # ----- host hooks -----

    @property
    def choices(self) -> tuple[str, ...]:
        return response_keys(self.keymap)

    @property
    def finished(self) -> bool:
        return self.rounds.finished and self._pending is None

    @property
    def pending(self) -> PendingStep | None:
        return self._pending

    def present(self) -> PendingStep | None:
        """Next unit to show, or None once every repetition has ended."""
        if self._pending is not None:
            raise RuntimeError("present() called while a step is still pending")
        unit = next(self._units, None)
        if unit is None:
            return None
        self._pending = PendingStep(unit=unit, repetition=self.repetition, onset=self.clock.now())
        return self._pending

    def complete(self, pending: PendingStep, key: str | None, rt: float | None) -> StepRecord:
        """Per-step completion hook: attach action and next state, then log it."""
        if pending is not self._pending:
            raise RuntimeError("complete() called for a step that is not pending")

        action = map_key(key, self.keymap)
        state = pending.state
        next_state = transition(state.player, state.opponent, action, self.rng)
        last = self.history.last()

        record = StepRecord(
            trial_index=len(self.history),
            repetition=pending.repetition,
            round=(last.round if last else 0) + 1,
            action=action,
            state=state,
            next_state=next_state,
            response=key,
            rt=rt,
            time_elapsed=(self.clock.now() - self._started_at) * 1000.0,
        )
        self.history.append(record)
        self.current_state = next_state
        self._pending = None
        LOG.debug("step %d: %s --%s--> %s", record.trial_index, state, action, next_state)
        return record

    def run(self, responses: KeyResponsePort) -> list[StepRecord]:
        """Drive every repetition to the end, or until the responses run out."""
        start = len(self.history)
        LOG.info(
            "Session start: repetitions=%d dispatch=%s window=%dms",
            self.rounds.repetitions,
            self.dispatch,
            self.trial_duration_ms,
        )
        while (pending := self.present()) is not None:
            try:
                resp = responses.wait_for_key(self.choices, self.trial_duration_ms)
            except ResponseStreamClosed:
                LOG.info("Response stream closed after %d steps.", len(self.history) - start)
                self._pending = None
                break
            self.complete(pending, resp.key, resp.rt)
        return list(self.history.since(start))

    # ----- internals -----

    def _last_record(self) -> StepRecord | None:
        if self.reset_between_rounds and len(self.history) <= self._round_start:
            return None
        return self.history.last()

    def _timeline(self) -> Iterator[GuardedUnit]:
        for repetition in range(1, self.rounds.repetitions + 1):
            self._begin_round(repetition)
            while True:
                yield from self._one_pass()
                if not self.rounds.should_continue(self.history.since(self._round_start)):
                    break

    def _begin_round(self, repetition: int) -> None:
        self.repetition = repetition
        self._round_start = len(self.history)
        self.current_state = state_after(self._last_record(), self.initial_state)
        LOG.debug("Round %d starts at %s", repetition, self.current_state)

    def _one_pass(self) -> Iterator[GuardedUnit]:
        if self.dispatch == "guarded":
            yield from self.table.scan()
        else:
            yield self.table.unit_for(self.current_state)
