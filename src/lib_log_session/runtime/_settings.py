"""Runtime settings resolved from call arguments and environment overrides.

Environment variables win over arguments, matching how deployments override
application defaults:

* ``LOG_CONSOLE_LEVEL`` – backend level of the namespace logger.
* ``LOG_CATEGORY_LEVELS`` – ``sql=trace,cache=debug`` per-category levels.
* ``LOG_DISPLAY_DATA`` – display bound parameter data.
* ``LOG_FORCE_COLOR`` / ``LOG_NO_COLOR`` – console colour switches.
* ``LOG_CONSOLE_STYLES`` – ``INFO=green,ERROR=bold red`` style overrides.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping

from lib_log_session.config import env_bool
from lib_log_session.domain.categories import DEFAULT_CATEGORY, LOGGER_CATEGORIES
from lib_log_session.domain.levels import BackendLevel


@dataclass(slots=True, frozen=True)
class RuntimeSettings:
    """Fully resolved configuration consumed by :func:`build_runtime`."""

    console_level: BackendLevel = BackendLevel.INFO
    category_levels: Mapping[str, BackendLevel] = field(default_factory=dict)
    display_data: bool | None = None
    install_console: bool = True
    force_color: bool = False
    no_color: bool = False
    console_styles: Mapping[str, str] = field(default_factory=dict)


def coerce_level(level: str | BackendLevel) -> BackendLevel:
    """Normalise level inputs (string or enum) into :class:`BackendLevel`.

    Examples
    --------
    >>> coerce_level("warning") is BackendLevel.WARN
    True
    >>> coerce_level(BackendLevel.ERROR) is BackendLevel.ERROR
    True
    """
    if isinstance(level, BackendLevel):
        return level
    return BackendLevel.from_name(level)


def _parse_pairs(raw: str | None) -> dict[str, str]:
    """Convert ``key=value`` comma-separated strings into a dictionary.

    Blank chunks and chunks without ``=`` are skipped.

    Examples
    --------
    >>> _parse_pairs('sql=trace, cache = debug, ,invalid')
    {'sql': 'trace', 'cache': 'debug'}
    >>> _parse_pairs(None)
    {}
    """
    if not raw:
        return {}
    result: dict[str, str] = {}
    for chunk in raw.split(","):
        if "=" not in chunk:
            continue
        key, value = chunk.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key or not value:
            continue
        result[key] = value
    return result


def _coerce_category_levels(levels: Mapping[str, str | BackendLevel]) -> dict[str, BackendLevel]:
    known = set(LOGGER_CATEGORIES) | {DEFAULT_CATEGORY}
    result: dict[str, BackendLevel] = {}
    for category, level in levels.items():
        if category not in known:
            raise ValueError(f"Unknown session log category: {category!r}")
        result[category] = coerce_level(level)
    return result


def _validate_console_styles(styles: Mapping[str, str]) -> dict[str, str]:
    """Reject style keys that do not name a backend level.

    Examples
    --------
    >>> _validate_console_styles({"warning": "yellow"})
    {'warning': 'yellow'}
    """
    for key in styles:
        if not isinstance(key, BackendLevel):
            BackendLevel.from_name(key)
    return dict(styles)


def build_runtime_settings(
    *,
    console_level: str | BackendLevel = BackendLevel.INFO,
    category_levels: Mapping[str, str | BackendLevel] | None = None,
    display_data: bool | None = None,
    install_console: bool = True,
    force_color: bool = False,
    no_color: bool = False,
    console_styles: Mapping[str, str] | None = None,
) -> RuntimeSettings:
    """Merge arguments with environment overrides into :class:`RuntimeSettings`.

    Raises
    ------
    ValueError
        When a level name, category name or console style key is unknown.
    """

    env_level = os.getenv("LOG_CONSOLE_LEVEL")
    resolved_level = coerce_level(env_level if env_level else console_level)

    merged_categories: dict[str, str | BackendLevel] = dict(category_levels or {})
    merged_categories.update(_parse_pairs(os.getenv("LOG_CATEGORY_LEVELS")))

    merged_styles = dict(console_styles or {})
    merged_styles.update(_parse_pairs(os.getenv("LOG_CONSOLE_STYLES")))

    return RuntimeSettings(
        console_level=resolved_level,
        category_levels=_coerce_category_levels(merged_categories),
        display_data=env_bool("LOG_DISPLAY_DATA", display_data),
        install_console=install_console,
        force_color=bool(env_bool("LOG_FORCE_COLOR", force_color)),
        no_color=bool(env_bool("LOG_NO_COLOR", no_color)),
        console_styles=_validate_console_styles(merged_styles),
    )


__all__ = ["RuntimeSettings", "build_runtime_settings", "coerce_level"]
