"""Public package surface of the category-aware session log adapter.

``CategorySessionLogger`` is the adapter the persistence framework calls; the
runtime helpers (``init``, ``get_session_log``, ``shutdown``) wire it to the
stdlib :mod:`logging` backend with a Rich console sink.
"""

from __future__ import annotations

from .adapters import CategorySessionLogger, RichConsoleHandler, StdlibBackendLogger, StdlibLoggerFactory
from .application import BackendLogger, BackendLoggerFactory, SessionLog
from .domain import (
    DEFAULT_CATEGORY,
    LOGGER_CATEGORIES,
    NAMESPACE,
    BackendLevel,
    SessionLevel,
    SessionLogEntry,
    translate,
)
from .runtime import (
    RuntimeSnapshot,
    get_session_log,
    init,
    inspect_runtime,
    is_initialised,
    logdemo,
    shutdown,
    summary_info,
)

__all__ = [
    "BackendLevel",
    "BackendLogger",
    "BackendLoggerFactory",
    "CategorySessionLogger",
    "DEFAULT_CATEGORY",
    "LOGGER_CATEGORIES",
    "NAMESPACE",
    "RichConsoleHandler",
    "RuntimeSnapshot",
    "SessionLevel",
    "SessionLog",
    "SessionLogEntry",
    "StdlibBackendLogger",
    "StdlibLoggerFactory",
    "get_session_log",
    "init",
    "inspect_runtime",
    "is_initialised",
    "logdemo",
    "shutdown",
    "summary_info",
    "translate",
]
