from __future__ import annotations

import logging
from typing import Final

from adapters.history import InMemoryHistory
from adapters.random import SeededRandomSource
from adapters.render import ImageStimulusRenderer, TextStimulusRenderer
from adapters.time import SystemClockPort
from domain.combat import CombatSession
from ports.history import HistoryPort
from ports.random import RandomSourcePort
from ports.render import StimulusRendererPort
from ports.time import ClockPort

from apps.experiment.settings import ExperimentSettings

LOG: Final = logging.getLogger("parry.compose")


def build_renderer(settings: ExperimentSettings, kind: str | None = None) -> StimulusRendererPort:
    kind = kind or settings.renderer
    if kind == "images":
        return ImageStimulusRenderer(asset_root=settings.asset_root)
    if kind == "text":
        return TextStimulusRenderer()
    raise ValueError(f"Unknown renderer: {kind}")


def build_session(
    settings: ExperimentSettings,
    *,
    clock: ClockPort | None = None,
    rng: RandomSourcePort | None = None,
    renderer: StimulusRendererPort | None = None,
    history: HistoryPort | None = None,
) -> CombatSession:
    session = CombatSession(
        renderer=renderer or build_renderer(settings),
        rng=rng or SeededRandomSource(settings.seed),
        history=history if history is not None else InMemoryHistory(),
        clock=clock or SystemClockPort(),
        keymap=settings.keymap,
        repetitions=settings.repetitions,
        trial_duration_ms=settings.trial_duration_ms,
        initial_state=settings.initial_state,
        dispatch=settings.dispatch,
        reset_between_rounds=settings.reset_between_rounds,
    )
    LOG.debug(
        "Session built: seed=%s dispatch=%s units=%d",
        settings.seed,
        settings.dispatch,
        len(session.table),
    )
    return session
