"""Severity scales and the fixed host-to-backend translation table.

Purpose
-------
Describe the two severity vocabularies the adapter bridges: the persistence
framework's session levels (``ALL`` .. ``OFF``) and the backend's smaller
scale (``TRACE`` .. ``ERROR`` plus ``OFF``).

Contents
--------
* :class:`SessionLevel` – host severity scale as an :class:`~enum.IntEnum`.
* :class:`BackendLevel` – backend severity scale with stdlib conversions.
* :func:`translate` – total mapping from any integer to a backend level.
* ``TRACE_LEVEL`` – stdlib numeric level used for ``TRACE`` records.

System Role
-----------
Pure domain data consulted on every ``should_log``/``log`` call. The table is
built at import time and exposed read-only so concurrent readers never need a
lock.
"""

from __future__ import annotations

import logging
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Mapping


TRACE_LEVEL = 5
"""Stdlib numeric level for ``TRACE``; sits below :data:`logging.DEBUG`."""


class SessionLevel(IntEnum):
    """Host session log levels, ordered from most to least verbose."""

    ALL = 0
    FINEST = 1
    FINER = 2
    FINE = 3
    CONFIG = 4
    INFO = 5
    WARNING = 6
    SEVERE = 7
    OFF = 8

    @property
    def label(self) -> str:
        """Return the capitalised name used in supplemental detail prefixes.

        Examples
        --------
        >>> SessionLevel.SEVERE.label
        'Severe'
        """

        return self.name.capitalize()

    @classmethod
    def from_name(cls, name: str) -> "SessionLevel":
        normalized = name.strip().upper()
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown session level: {name!r}") from exc


class BackendLevel(Enum):
    """Backend severities the adapter dispatches to."""

    TRACE = "trace"
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    OFF = "off"

    @property
    def enabled_query(self) -> str:
        """Return the backend logger method answering "is this level on"."""

        return f"is_{self.value}_enabled"

    @property
    def dispatchable(self) -> bool:
        return self is not BackendLevel.OFF

    def to_python_level(self) -> int:
        """Return the :mod:`logging` numeric level for this severity.

        ``OFF`` maps above ``CRITICAL`` so that it never passes a threshold.

        Examples
        --------
        >>> BackendLevel.WARN.to_python_level() == logging.WARNING
        True
        >>> BackendLevel.TRACE.to_python_level()
        5
        """

        return _PYTHON_LEVELS[self]

    @classmethod
    def from_name(cls, name: str) -> "BackendLevel":
        """Parse ``name`` case-insensitively; ``warning`` is accepted for ``WARN``."""

        normalized = name.strip().upper()
        if normalized == "WARNING":
            normalized = "WARN"
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown backend level: {name!r}") from exc


_PYTHON_LEVELS: Mapping[BackendLevel, int] = MappingProxyType(
    {
        BackendLevel.TRACE: TRACE_LEVEL,
        BackendLevel.DEBUG: logging.DEBUG,
        BackendLevel.INFO: logging.INFO,
        BackendLevel.WARN: logging.WARNING,
        BackendLevel.ERROR: logging.ERROR,
        BackendLevel.OFF: logging.CRITICAL + 10,
    }
)


LEVEL_TRANSLATION: Mapping[int, BackendLevel] = MappingProxyType(
    {
        SessionLevel.ALL: BackendLevel.TRACE,
        SessionLevel.FINEST: BackendLevel.TRACE,
        SessionLevel.FINER: BackendLevel.TRACE,
        SessionLevel.FINE: BackendLevel.DEBUG,
        SessionLevel.CONFIG: BackendLevel.DEBUG,
        SessionLevel.INFO: BackendLevel.INFO,
        SessionLevel.WARNING: BackendLevel.WARN,
        SessionLevel.SEVERE: BackendLevel.ERROR,
    }
)
# Host OFF and off-scale values are absent and translate to OFF.


def translate(level: int) -> BackendLevel:
    """Return the backend level for host ``level``; unmapped values yield ``OFF``.

    Examples
    --------
    >>> translate(SessionLevel.FINE)
    <BackendLevel.DEBUG: 'debug'>
    >>> translate(42)
    <BackendLevel.OFF: 'off'>
    """

    return LEVEL_TRANSLATION.get(level, BackendLevel.OFF)


__all__ = [
    "BackendLevel",
    "LEVEL_TRANSLATION",
    "SessionLevel",
    "TRACE_LEVEL",
    "translate",
]
