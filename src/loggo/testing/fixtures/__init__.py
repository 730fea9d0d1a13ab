"""Testing fixtures – pytest fixtures for logging doubles."""
try:
    import pytest  # noqa: F401

    from loggo.testing.fixtures.logger import (
        fake_logger,
        fake_terminator,
        frozen_clock,
        memory_sink,
    )

except ImportError:
    pass

__all__ = [
    "fake_logger",
    "fake_terminator",
    "frozen_clock",
    "memory_sink",
]
