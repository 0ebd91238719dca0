from .memory import InMemoryHistory

__all__ = ["InMemoryHistory"]
