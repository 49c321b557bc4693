"""Session log entry value object.

Purpose
-------
Provide an immutable representation of one record handed over by the
persistence framework's logging API.

Contents
--------
* :class:`SessionLogEntry` dataclass.
* Utility function ``_ensure_aware`` for timestamp validation.

System Role
-----------
Domain object consumed by :class:`lib_log_session.application.session_log.SessionLog`
implementations. Rendering lives in the application layer; the entry only
carries data.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any

from .levels import SessionLevel


def _ensure_aware(ts: datetime) -> datetime:
    """Validate that ``ts`` is timezone-aware and normalise to UTC."""
    if ts.tzinfo is None or ts.tzinfo.utcoffset(ts) is None:
        raise ValueError("timestamp must be timezone-aware")
    return ts.astimezone(timezone.utc)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True, frozen=True)
class SessionLogEntry:
    """Immutable session log record.

    Attributes
    ----------
    level:
        Host severity. Usually a :class:`SessionLevel`, but any integer is
        accepted because the host may hand over values outside the scale.
    message:
        Message text, optionally containing ``{0}``-style placeholders.
    category:
        Category name such as ``"sql"``; ``None`` selects the default logger.
    parameters:
        Positional values substituted into ``message``.
    timestamp:
        Time of the entry in timezone-aware UTC.
    thread, session, connection:
        Optional identifiers rendered in the supplemental detail prefix.
    exception:
        Exception captured alongside the entry, if any.
    """

    level: int
    message: str
    category: str | None = None
    parameters: tuple[Any, ...] = ()
    timestamp: datetime = field(default_factory=_utcnow)
    thread: str | None = None
    session: str | None = None
    connection: str | None = None
    exception: BaseException | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "timestamp", _ensure_aware(self.timestamp))
        object.__setattr__(self, "parameters", tuple(self.parameters))

    @property
    def session_level(self) -> SessionLevel | None:
        """Return ``level`` as :class:`SessionLevel` or ``None`` when off-scale."""

        try:
            return SessionLevel(self.level)
        except ValueError:
            return None

    def replace(self, **changes: Any) -> "SessionLogEntry":
        """Return a copied entry with ``changes`` applied."""

        return replace(self, **changes)


__all__ = ["SessionLogEntry"]
