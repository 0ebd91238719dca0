from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


class RandomSourcePort(ABC):
    """Seeded randomness shared by one session; one draw per pick."""

    @abstractmethod
    def pick_one(self, candidates: Sequence[T]) -> T: ...
