from .fakes import PromptRecord, ScriptedKeyResponsePort
from .simulated import RandomKeyResponsePort

__all__ = ["ScriptedKeyResponsePort", "PromptRecord", "RandomKeyResponsePort"]
