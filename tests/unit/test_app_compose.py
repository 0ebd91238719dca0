from __future__ import annotations

import pytest
from adapters.random import SeededRandomSource
from adapters.render import ImageStimulusRenderer, TextStimulusRenderer
from adapters.time import FakeClockPort
from domain.combat import CombatSession
from domain.types import GameState

from apps.experiment.compose import build_renderer, build_session
from apps.experiment.settings import ExperimentSettings


def test_build_session_wires_settings():
    settings = ExperimentSettings(
        repetitions=2,
        trial_duration_ms=300,
        dispatch="direct",
        seed="7",
        initial_opponent="block",
    )
    session = build_session(settings, clock=FakeClockPort())

    assert isinstance(session, CombatSession)
    assert isinstance(session.rng, SeededRandomSource)
    assert session.rng.seed == "7"
    assert session.rounds.repetitions == 2
    assert session.trial_duration_ms == 300
    assert session.dispatch == "direct"
    assert session.initial_state == GameState("neutral", "block")
    assert len(session.table) == 49


def test_build_renderer_kinds():
    settings = ExperimentSettings(asset_root="static")
    images = build_renderer(settings)
    assert isinstance(images, ImageStimulusRenderer)
    assert images.asset_root == "static"
    assert isinstance(build_renderer(settings, "text"), TextStimulusRenderer)

    with pytest.raises(ValueError):
        build_renderer(settings, "svg")


def test_explicit_collaborators_are_used():
    clock = FakeClockPort(start=5.0)
    renderer = TextStimulusRenderer()
    session = build_session(ExperimentSettings(), clock=clock, renderer=renderer)
    assert session.clock is clock
    unit = session.table.unit_for(GameState("neutral", "windup"))
    assert unit.stimulus.opponent == "winding up..."
