from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from shared.contracts.v1.step import StepRecord


class HistoryPort(ABC):
    """Append-only step log. The last entry may be replaced for the round correction."""

    @abstractmethod
    def append(self, record: StepRecord) -> None: ...

    @abstractmethod
    def last(self) -> StepRecord | None: ...

    @abstractmethod
    def records(self) -> Sequence[StepRecord]: ...

    @abstractmethod
    def since(self, index: int) -> Sequence[StepRecord]: ...

    @abstractmethod
    def amend_last(self, record: StepRecord) -> None: ...

    @abstractmethod
    def __len__(self) -> int: ...
