"""Ports consumed by the session log adapter."""

from __future__ import annotations

from .backend import BackendLogger, BackendLoggerFactory

__all__ = ["BackendLogger", "BackendLoggerFactory"]
