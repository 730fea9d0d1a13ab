"""Testing support – fakes and pytest fixtures.

Import in your ``conftest.py``::

    pytest_plugins = ["loggo.testing.fixtures"]
"""

from loggo.testing.fakes import (
    FakeClock,
    FakeLogger,
    FakeTerminator,
    InMemorySink,
    RecordedLog,
)

__all__ = [
    "FakeClock",
    "FakeLogger",
    "FakeTerminator",
    "InMemorySink",
    "RecordedLog",
]
