from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import cycle
from typing import Any, TypeVar

from ports.random import RandomSourcePort

T = TypeVar("T")


class ScriptedRandomSource(RandomSourcePort):
    """Picks by a repeating list of indices and records every draw."""

    def __init__(self, indices: Iterable[int] = (0,)) -> None:
        self._indices = cycle(list(indices) or [0])
        self.calls: list[tuple[Any, ...]] = []

    @property
    def draws(self) -> int:
        return len(self.calls)

    def pick_one(self, candidates: Sequence[T]) -> T:
        self.calls.append(tuple(candidates))
        return candidates[next(self._indices) % len(candidates)]
