from __future__ import annotations

import random
from collections.abc import Sequence
from typing import TypeVar

from ports.random import RandomSourcePort

T = TypeVar("T")


class SeededRandomSource(RandomSourcePort):
    """random.Random wrapper; the same seed replays the same picks."""

    def __init__(self, seed: int | str | None = None) -> None:
        self.seed = seed
        self._rng = random.Random(seed)
        self.draws = 0

    def pick_one(self, candidates: Sequence[T]) -> T:
        if not candidates:
            raise ValueError("pick_one() needs at least one candidate")
        self.draws += 1
        # sample one without replacement
        return self._rng.sample(list(candidates), 1)[0]
