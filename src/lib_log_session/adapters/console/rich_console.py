"""Rich-powered console handler for backend log records.

Purpose
-------
Render the records written by the session log adapter to a terminal with
per-level colours, so the CLI demo and simple deployments get readable output
without extra handler configuration.

Contents
--------
* :data:`_STYLE_MAP` - default level-to-style mapping.
* :class:`RichConsoleHandler` - :class:`logging.Handler` installed by
  :func:`lib_log_session.init`.

System Role
-----------
Default sink attached to the namespace logger by the runtime. Styles can be
overridden per level and colour can be forced or disabled.
"""

from __future__ import annotations

import logging
from typing import Mapping

from rich.console import Console

from lib_log_session.domain.levels import BackendLevel


#: Default Rich styles keyed by :class:`BackendLevel`.
_STYLE_MAP: Mapping[BackendLevel, str] = {
    BackendLevel.TRACE: "dim",
    BackendLevel.DEBUG: "grey50",
    BackendLevel.INFO: "cyan",
    BackendLevel.WARN: "yellow",
    BackendLevel.ERROR: "bold red",
}


def _backend_level_for(levelno: int) -> BackendLevel:
    """Return the highest backend level not above ``levelno``.

    Examples
    --------
    >>> _backend_level_for(logging.WARNING)
    <BackendLevel.WARN: 'warn'>
    >>> _backend_level_for(logging.CRITICAL)
    <BackendLevel.ERROR: 'error'>
    >>> _backend_level_for(1)
    <BackendLevel.TRACE: 'trace'>
    """
    resolved = BackendLevel.TRACE
    for level in _STYLE_MAP:
        if level.to_python_level() <= levelno:
            resolved = level
    return resolved


class RichConsoleHandler(logging.Handler):
    """Print log records through Rich with level-specific styles."""

    def __init__(
        self,
        *,
        console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
        styles: Mapping[BackendLevel | str, str] | None = None,
        level: int = logging.NOTSET,
    ) -> None:
        """Configure the handler with colour and style overrides."""
        super().__init__(level=level)
        if console is not None:
            self._console = console
        else:
            self._console = Console(force_terminal=force_color or None, no_color=no_color, stderr=True)
        self._no_color = no_color
        merged = dict(_STYLE_MAP)
        for key, value in (styles or {}).items():
            level_key = BackendLevel.from_name(key) if isinstance(key, str) else key
            if level_key.dispatchable:
                merged[level_key] = value
        self._style_map = merged

    @property
    def console(self) -> Console:
        return self._console

    @property
    def styles(self) -> Mapping[BackendLevel, str]:
        return dict(self._style_map)

    def emit(self, record: logging.LogRecord) -> None:
        """Print ``record`` using Rich.

        Examples
        --------
        >>> from io import StringIO
        >>> console = Console(file=StringIO(), record=True, width=200)
        >>> handler = RichConsoleHandler(console=console)
        >>> record = logging.LogRecord("org.eclipse.persistence.logging.sql", logging.INFO, __file__, 1, "SELECT 1", None, None)
        >>> handler.emit(record)
        >>> "SELECT 1" in console.export_text()
        True
        """
        try:
            line = self.format(record) if self.formatter is not None else self._format_line(record)
            style = "" if self._no_color else self._style_map[_backend_level_for(record.levelno)]
            self._console.print(line, style=style, highlight=False, markup=False)
        except Exception:
            self.handleError(record)

    @staticmethod
    def _format_line(record: logging.LogRecord) -> str:
        """Return the default console line for ``record``."""
        return f"{record.levelname:>7} {record.name} - {record.getMessage()}"


__all__ = ["RichConsoleHandler"]
