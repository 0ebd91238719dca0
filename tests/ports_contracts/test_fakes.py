from __future__ import annotations

import pytest
from adapters.history import InMemoryHistory
from adapters.keyboard import RandomKeyResponsePort, ScriptedKeyResponsePort
from adapters.random import ScriptedRandomSource, SeededRandomSource
from adapters.time import FakeClockPort, SystemClockPort
from domain.types import INITIAL_STATE
from ports import (
    ClockPort,
    HistoryPort,
    KeyResponsePort,
    RandomSourcePort,
    ResponseStreamClosed,
)
from shared.contracts.v1.step import StepRecord

CHOICES = ("q", "w", "e")


def _rec(i: int) -> StepRecord:
    return StepRecord(
        trial_index=i,
        repetition=1,
        round=i + 1,
        action="none",
        state=INITIAL_STATE,
        next_state=INITIAL_STATE,
    )


def test_scripted_keys_replay_and_close():
    clock = FakeClockPort()
    port: KeyResponsePort = ScriptedKeyResponsePort(["q", None, "x", ""], rt_ms=300, clock=clock)

    first = port.wait_for_key(CHOICES, 500)
    assert (first.key, first.rt) == ("q", 300.0)
    assert clock.now() == pytest.approx(0.3)

    # timeout, key outside choices, and empty entry all time out
    for _ in range(3):
        resp = port.wait_for_key(CHOICES, 500)
        assert (resp.key, resp.rt) == (None, None)
    assert clock.now() == pytest.approx(1.8)

    with pytest.raises(ResponseStreamClosed):
        port.wait_for_key(CHOICES, 500)
    assert port.prompts[0].choices == CHOICES
    assert port.prompts[0].timeout_ms == 500


def test_scripted_keys_slower_than_window_time_out():
    port = ScriptedKeyResponsePort(["q"], rt_ms=600)
    assert port.wait_for_key(CHOICES, 500).key is None


def test_scripted_keys_from_csv():
    port = ScriptedKeyResponsePort.from_csv("q, e,,w")
    assert port.remaining == 4
    keys = [port.wait_for_key(CHOICES, 500).key for _ in range(4)]
    assert keys == ["q", "e", None, "w"]


def test_simulated_participant_is_reproducible():
    def take(seed: str) -> list:
        port = RandomKeyResponsePort(seed=seed, max_responses=50)
        return [port.wait_for_key(CHOICES, 500) for _ in range(50)]

    run = take("s1")
    assert run == take("s1")
    for resp in run:
        assert resp.key is None or resp.key in CHOICES
        assert (resp.key is None) == (resp.rt is None)
        if resp.rt is not None:
            assert 0 < resp.rt < 500


def test_simulated_participant_stops_at_limit():
    port = RandomKeyResponsePort(seed=1, max_responses=2)
    port.wait_for_key(CHOICES, 500)
    port.wait_for_key(CHOICES, 500)
    with pytest.raises(ResponseStreamClosed):
        port.wait_for_key(CHOICES, 500)


def test_seeded_random_source():
    a: RandomSourcePort = SeededRandomSource("1234")
    b = SeededRandomSource("1234")
    candidates = ("left", "right")
    picks = [a.pick_one(candidates) for _ in range(20)]
    assert picks == [b.pick_one(candidates) for _ in range(20)]
    assert set(picks) <= set(candidates)
    assert a.draws == 20

    with pytest.raises(ValueError):
        a.pick_one(())


def test_scripted_random_source_cycles_indices():
    rng = ScriptedRandomSource([1, 0])
    assert [rng.pick_one("ab") for _ in range(4)] == ["b", "a", "b", "a"]
    assert rng.draws == 4


def test_in_memory_history():
    history: HistoryPort = InMemoryHistory()
    assert history.last() is None
    assert len(history) == 0

    for i in range(3):
        history.append(_rec(i))
    assert len(history) == 3
    assert history.last().trial_index == 2
    assert [r.trial_index for r in history.since(1)] == [1, 2]

    history.amend_last(history.last().with_round_bumped())
    assert [r.round for r in history.records()] == [1, 2, 4]

    with pytest.raises(ValueError):
        history.amend_last(_rec(0))


def test_amend_on_empty_history_raises():
    with pytest.raises(IndexError):
        InMemoryHistory().amend_last(_rec(0))


def test_clocks():
    fake: ClockPort = FakeClockPort(start=1.0)
    assert fake.now() == 1.0
    fake.advance_ms(250)
    assert fake.now() == pytest.approx(1.25)
    fake.advance(-5)  # never runs backwards
    assert fake.now() == pytest.approx(1.25)

    real = SystemClockPort()
    t1 = real.now()
    assert real.now() >= t1
