from __future__ import annotations

from collections.abc import Sequence

from ports.history import HistoryPort
from shared.contracts.v1.step import StepRecord


class InMemoryHistory(HistoryPort):
    """List-backed step log for a single session."""

    def __init__(self) -> None:
        self._records: list[StepRecord] = []

    def append(self, record: StepRecord) -> None:
        self._records.append(record)

    def last(self) -> StepRecord | None:
        return self._records[-1] if self._records else None

    def records(self) -> Sequence[StepRecord]:
        return tuple(self._records)

    def since(self, index: int) -> Sequence[StepRecord]:
        return tuple(self._records[max(0, index) :])

    def amend_last(self, record: StepRecord) -> None:
        if not self._records:
            raise IndexError("amend_last() on an empty history")
        if record.trial_index != self._records[-1].trial_index:
            raise ValueError(
                f"amend_last() expects trial {self._records[-1].trial_index}, "
                f"got {record.trial_index}"
            )
        self._records[-1] = record

    def __len__(self) -> int:
        return len(self._records)
