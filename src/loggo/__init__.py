"""
loggo – leveled, multi-sink structured logging.

Import path convention::

    from loggo.observability.logging import new_logger, Severity
    from loggo.config.settings import LoggerSettings
    from loggo.testing.fakes import FakeLogger
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
