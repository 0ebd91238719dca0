from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Final

from domain.types import is_terminal
from ports.history import HistoryPort
from shared.contracts.v1.step import StepRecord

LOG: Final = logging.getLogger("parry.rounds")


class RoundController:
    """Decides after each pass whether the current round keeps looping."""

    def __init__(self, history: HistoryPort, repetitions: int = 10) -> None:
        self.history: Final = history
        self.repetitions = max(0, int(repetitions))
        self.rounds_completed = 0

    def should_continue(self, round_records: Sequence[StepRecord]) -> bool:
        """
        Round-continuation hook. The round ends on the record whose *starting*
        state is terminal; that record (the newest in the history) gets its
        round number bumped once before the loop stops.
        """
        if not round_records:
            return True
        last = round_records[-1]
        if not is_terminal(last.state):
            return True

        self.history.amend_last(last.with_round_bumped())
        self.rounds_completed += 1
        LOG.info(
            "Round ended at step %d (%s); %d/%d done.",
            last.trial_index,
            last.state,
            self.rounds_completed,
            self.repetitions,
        )
        return False

    @property
    def finished(self) -> bool:
        return self.rounds_completed >= self.repetitions
