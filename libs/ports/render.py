from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from domain.types import AgentState


@dataclass(frozen=True)
class Stimulus:
    # opaque references (image paths or labels); "" means nothing is drawn
    player: str
    opponent: str

    def to_html(self) -> str:
        return (
            '<div style="display: flex; flex-direction: column; align-items: center; width: 20vw;">'
            f'<img style="width: 50%;" src="{self.opponent}"/>'
            f'<img style="width: 100%;" src="{self.player}"/>'
            "</div>"
        )


class StimulusRendererPort(Protocol):
    def render(self, player: AgentState, opponent: AgentState) -> Stimulus: ...
