"""Domain value objects shared by the session log adapter."""

from __future__ import annotations

from .categories import DEFAULT_CATEGORY, DEFAULT_NAMESPACE, LOGGER_CATEGORIES, NAMESPACE, logger_name
from .entry import SessionLogEntry
from .levels import LEVEL_TRANSLATION, TRACE_LEVEL, BackendLevel, SessionLevel, translate

__all__ = [
    "BackendLevel",
    "DEFAULT_CATEGORY",
    "DEFAULT_NAMESPACE",
    "LEVEL_TRANSLATION",
    "LOGGER_CATEGORIES",
    "NAMESPACE",
    "SessionLevel",
    "SessionLogEntry",
    "TRACE_LEVEL",
    "logger_name",
    "translate",
]
