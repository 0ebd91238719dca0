from __future__ import annotations

from collections.abc import Mapping
from typing import Final

from domain.types import AgentState
from ports.render import Stimulus

LABELS: Final[Mapping[AgentState, str]] = {
    "neutral": "idle",
    "block": "BLOCK",
    "windup": "winding up...",
    "hit1": "hit!",
    "hit2": "HIT!!",
    "combo": "jab",
    "combo2": "CROSS",
}


class TextStimulusRenderer:
    """Short labels for terminal display. The player never shows a wind-up."""

    def render(self, player: AgentState, opponent: AgentState) -> Stimulus:
        return Stimulus(
            player="" if player == "windup" else LABELS[player],
            opponent=LABELS[opponent],
        )
