from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Collection
from dataclasses import dataclass


class ResponseStreamClosed(Exception):
    """No further responses will arrive (script exhausted, participant left)."""


@dataclass(frozen=True)
class KeyResponse:
    key: str | None  # None when the window elapsed
    rt: float | None  # ms from stimulus onset


class KeyResponsePort(ABC):
    """Waits for one keypress out of `choices`, or for the window to elapse."""

    @abstractmethod
    def wait_for_key(self, choices: Collection[str], timeout_ms: int) -> KeyResponse: ...
