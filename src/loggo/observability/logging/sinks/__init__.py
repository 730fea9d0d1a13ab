"""Log sinks: durable JSON-lines file and human-readable console."""

from loggo.observability.logging.sinks.base import RenderingSink
from loggo.observability.logging.sinks.console import ConsoleSink
from loggo.observability.logging.sinks.file import JsonFileSink

__all__ = ["ConsoleSink", "JsonFileSink", "RenderingSink"]
