from __future__ import annotations

from collections.abc import Collection, Iterable
from dataclasses import dataclass

from adapters.time.fakes import FakeClockPort
from ports.input import KeyResponse, KeyResponsePort, ResponseStreamClosed


@dataclass(frozen=True)
class PromptRecord:
    choices: tuple[str, ...]
    timeout_ms: int


class ScriptedKeyResponsePort(KeyResponsePort):
    """
    Replays a fixed response script; None (or "") is a timeout. Keys outside
    `choices` are ignored the way a live host ignores them, so they also count
    as a timeout. Raises ResponseStreamClosed once the script is used up.
    """

    def __init__(
        self,
        script: Iterable[str | None],
        rt_ms: float = 250.0,
        clock: FakeClockPort | None = None,
    ) -> None:
        self._script = [k or None for k in script]
        self._pos = 0
        self.rt_ms = float(rt_ms)
        self.clock = clock
        self.prompts: list[PromptRecord] = []

    @classmethod
    def from_csv(cls, text: str, **kwargs) -> ScriptedKeyResponsePort:
        """Parse "q,e,,w" as q, e, timeout, w."""
        return cls([k.strip() or None for k in text.split(",")], **kwargs)

    @property
    def remaining(self) -> int:
        return len(self._script) - self._pos

    def wait_for_key(self, choices: Collection[str], timeout_ms: int) -> KeyResponse:
        if self._pos >= len(self._script):
            raise ResponseStreamClosed(f"script exhausted after {self._pos} responses")
        key = self._script[self._pos]
        self._pos += 1
        self.prompts.append(PromptRecord(choices=tuple(choices), timeout_ms=int(timeout_ms)))

        if key is None or key not in choices or self.rt_ms >= timeout_ms:
            self._tick(timeout_ms)
            return KeyResponse(key=None, rt=None)
        self._tick(self.rt_ms)
        return KeyResponse(key=key, rt=self.rt_ms)

    def _tick(self, ms: float) -> None:
        if self.clock is not None:
            self.clock.advance_ms(ms)
