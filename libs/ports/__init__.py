from .history import HistoryPort
from .input import KeyResponse, KeyResponsePort, ResponseStreamClosed
from .random import RandomSourcePort
from .render import Stimulus, StimulusRendererPort
from .time import ClockPort

__all__ = [
    "KeyResponsePort",
    "KeyResponse",
    "ResponseStreamClosed",
    "RandomSourcePort",
    "HistoryPort",
    "Stimulus",
    "StimulusRendererPort",
    "ClockPort",
]
