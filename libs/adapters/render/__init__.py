from .images import OPPONENT_IMAGES, PLAYER_IMAGES, ImageStimulusRenderer
from .text import TextStimulusRenderer

__all__ = [
    "ImageStimulusRenderer",
    "TextStimulusRenderer",
    "OPPONENT_IMAGES",
    "PLAYER_IMAGES",
]
