"""Testing fakes – in-memory doubles for the logging ports."""
from loggo.testing.fakes.clock import FakeClock
from loggo.testing.fakes.logger import FakeLogger, RecordedLog
from loggo.testing.fakes.sink import InMemorySink
from loggo.testing.fakes.terminator import FakeTerminator
from loggo.kernel.time import FrozenClock

__all__ = [
    "FakeClock",
    "FakeLogger",
    "FakeTerminator",
    "FrozenClock",
    "InMemorySink",
    "RecordedLog",
]
