"""Stdlib logging adapter – route ``logging`` records into a loggo Logger."""
from loggo.adapters.stdlib_logging.handler import LoggoHandler

__all__ = ["LoggoHandler"]
