"""Debugger adapter – map scraper/crawler debug events onto ``Logger.debug``."""
from loggo.adapters.debugger.bridge import DebugEvent, DebugEventBridge

__all__ = ["DebugEvent", "DebugEventBridge"]
