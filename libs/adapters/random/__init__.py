from .fakes import ScriptedRandomSource
from .seeded import SeededRandomSource

__all__ = ["SeededRandomSource", "ScriptedRandomSource"]
