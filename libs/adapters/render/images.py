from __future__ import annotations

from collections.abc import Mapping
from pathlib import PurePosixPath
from typing import Final

from domain.types import AgentState
from ports.render import Stimulus

OPPONENT_IMAGES: Final[Mapping[AgentState, str]] = {
    "neutral": "opponent/neutral.png",
    "block": "opponent/block.png",
    "windup": "opponent/windup.png",
    "hit1": "opponent/hit1.png",
    "hit2": "opponent/hit2.png",
    "combo": "opponent/strike1.png",
    "combo2": "opponent/strike2.png",
}

# player has no wind-up pose; both hit stages share one image
PLAYER_IMAGES: Final[Mapping[AgentState, str]] = {
    "neutral": "player/neutral.png",
    "block": "player/block.png",
    "windup": "",
    "hit1": "player/hit.png",
    "hit2": "player/hit.png",
    "combo": "player/jab.png",
    "combo2": "player/cross.png",
}


class ImageStimulusRenderer:
    """Resolves each posture to an image path under `asset_root`."""

    def __init__(self, asset_root: str = "images") -> None:
        self.asset_root = asset_root

    def _path(self, rel: str) -> str:
        if not rel:
            return ""
        return str(PurePosixPath(self.asset_root) / rel) if self.asset_root else rel

    def player_image(self, state: AgentState) -> str:
        return self._path(PLAYER_IMAGES[state])

    def opponent_image(self, state: AgentState) -> str:
        return self._path(OPPONENT_IMAGES[state])

    def render(self, player: AgentState, opponent: AgentState) -> Stimulus:
        return Stimulus(player=self.player_image(player), opponent=self.opponent_image(opponent))

    def image_paths(self) -> list[str]:
        """Every distinct image the experiment can show (for preloading)."""
        paths = {self._path(p) for p in (*OPPONENT_IMAGES.values(), *PLAYER_IMAGES.values())}
        paths.discard("")
        return sorted(paths)
