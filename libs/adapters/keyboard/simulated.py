from __future__ import annotations

import random
from collections.abc import Collection

from ports.input import KeyResponse, KeyResponsePort, ResponseStreamClosed


class RandomKeyResponsePort(KeyResponsePort):
    """
    Simulated participant for headless runs: presses a random allowed key or
    lets the window elapse. Uses its own RNG so it never consumes draws from
    the session's random source.
    """

    def __init__(
        self,
        seed: int | str | None = None,
        miss_rate: float = 0.25,
        rt_range_ms: tuple[float, float] = (180.0, 450.0),
        max_responses: int | None = 10_000,
    ) -> None:
        self._rng = random.Random(seed)
        self.miss_rate = min(max(float(miss_rate), 0.0), 1.0)
        self.rt_range_ms = rt_range_ms
        self.max_responses = max_responses
        self.count = 0

    def wait_for_key(self, choices: Collection[str], timeout_ms: int) -> KeyResponse:
        if self.max_responses is not None and self.count >= self.max_responses:
            raise ResponseStreamClosed(f"simulated participant stopped after {self.count}")
        self.count += 1

        keys = sorted(choices)
        if not keys or self._rng.random() < self.miss_rate:
            return KeyResponse(key=None, rt=None)
        rt = self._rng.uniform(*self.rt_range_ms)
        if rt >= timeout_ms:
            return KeyResponse(key=None, rt=None)
        return KeyResponse(key=self._rng.choice(keys), rt=round(rt, 1))
