"""Concrete adapters: the session logger, the stdlib backend and console sinks."""

from __future__ import annotations

from .console import RichConsoleHandler
from .session_logger import CategorySessionLogger
from .stdlib import StdlibBackendLogger, StdlibLoggerFactory

__all__ = [
    "CategorySessionLogger",
    "RichConsoleHandler",
    "StdlibBackendLogger",
    "StdlibLoggerFactory",
]
