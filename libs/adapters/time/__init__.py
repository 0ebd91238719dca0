from .fakes import FakeClockPort
from .system import SystemClockPort

__all__ = ["FakeClockPort", "SystemClockPort"]
