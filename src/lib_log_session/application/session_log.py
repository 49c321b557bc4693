"""Host-side session log contract and message rendering.

Purpose
-------
Model the persistence framework's logging API that concrete session loggers
plug into: the abstract ``log``/``should_log`` operations, the tri-state
"display bound parameter data" flag, and the routines that render an entry's
supplemental detail prefix and primary message.

Contents
--------
* :class:`SessionLog` – abstract base class implemented by adapters.
* ``HIDDEN_PARAMETER`` – placeholder substituted for hidden bind values.

System Role
-----------
Application-layer base of :class:`lib_log_session.adapters.session_logger.CategorySessionLogger`.
Rendering is deliberately minimal; adapters treat both rendering routines as
opaque string producers.
"""

from __future__ import annotations

import traceback
from abc import ABC, abstractmethod

from lib_log_session.domain.entry import SessionLogEntry


HIDDEN_PARAMETER = "[hidden]"

_SQL_CATEGORY = "sql"


class SessionLog(ABC):
    """Abstract session log with the rendering helpers every logger shares.

    Attributes
    ----------
    print_date, print_thread, print_session, print_connection:
        Toggle the matching parts of the supplemental detail prefix.
    print_exception_stack:
        Render full tracebacks for captured exceptions instead of one line.
    """

    def __init__(self) -> None:
        self._display_data: bool | None = None
        self.print_date = True
        self.print_thread = True
        self.print_session = True
        self.print_connection = True
        self.print_exception_stack = False

    @abstractmethod
    def log(self, entry: SessionLogEntry) -> None:
        """Write ``entry`` if its level is enabled for its category."""

    @abstractmethod
    def should_log(self, level: int, category: str | None = None) -> bool:
        """Return ``True`` when ``level`` would be written for ``category``."""

    @abstractmethod
    def should_display_data(self) -> bool:
        """Return whether bound parameter values may appear in messages."""

    @property
    def display_data(self) -> bool | None:
        """Raw tri-state flag; ``None`` means never set."""

        return self._display_data

    def set_should_display_data(self, value: bool | None) -> None:
        """Set the tri-state flag; ``None`` restores the unset state."""

        self._display_data = value

    def get_supplement_detail_string(self, entry: SessionLogEntry) -> str:
        """Return the bracketed prefix describing where ``entry`` came from.

        Examples
        --------
        >>> from datetime import datetime, timezone
        >>> from lib_log_session.domain.levels import SessionLevel
        >>> class _Log(SessionLog):
        ...     def log(self, entry): ...
        ...     def should_log(self, level, category=None): return True
        ...     def should_display_data(self): return False
        >>> log = _Log()
        >>> log.print_date = False
        >>> entry = SessionLogEntry(SessionLevel.FINE, "x", category="sql", thread="main")
        >>> log.get_supplement_detail_string(entry)
        '[EL Fine]: sql: Thread(main)--'
        """

        level = entry.session_level
        label = level.label if level is not None else f"Level {entry.level}"
        parts = [f"[EL {label}]: "]
        if entry.category:
            parts.append(f"{entry.category}: ")
        if self.print_date:
            parts.append(f"{entry.timestamp.isoformat()}--")
        if self.print_session and entry.session:
            parts.append(f"{entry.session}--")
        if self.print_connection and entry.connection:
            parts.append(f"Connection({entry.connection})--")
        if self.print_thread and entry.thread:
            parts.append(f"Thread({entry.thread})--")
        return "".join(parts)

    def format_message(self, entry: SessionLogEntry) -> str:
        """Render ``entry.message`` with its parameters and captured exception.

        SQL parameters are replaced by ``HIDDEN_PARAMETER`` unless
        :meth:`should_display_data` allows them. A message whose placeholders
        do not match its parameters is returned unformatted.
        """

        message = entry.message
        if entry.parameters:
            parameters = entry.parameters
            if entry.category == _SQL_CATEGORY and not self.should_display_data():
                parameters = tuple(HIDDEN_PARAMETER for _ in parameters)
            try:
                message = message.format(*parameters)
            except (AttributeError, IndexError, KeyError, TypeError, ValueError):
                message = entry.message
        if entry.exception is not None:
            message = f"{message}\n{self._format_exception(entry.exception)}"
        return message

    def _format_exception(self, exc: BaseException) -> str:
        if self.print_exception_stack:
            return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)).rstrip("\n")
        return f"{type(exc).__name__}: {exc}"


__all__ = ["HIDDEN_PARAMETER", "SessionLog"]
