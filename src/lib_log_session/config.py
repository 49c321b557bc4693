"""Environment configuration helpers, including optional ``.env`` loading.

Purpose
-------
Let deployments feed runtime settings (``LOG_CONSOLE_LEVEL``,
``LOG_CATEGORY_LEVELS`` ...) from a ``.env`` file next to the application
without overriding variables that are already exported.

Contents
--------
* ``DOTENV_ENV_VAR`` – toggle consulted when no explicit CLI flag is given.
* :func:`should_use_dotenv` – precedence rules (explicit flag > env toggle).
* :func:`enable_dotenv` – locate and load the nearest ``.env`` once.
* :func:`env_bool` – shared ``1/true/yes/on`` interpretation.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv


DOTENV_ENV_VAR = "LIB_LOG_SESSION_USE_DOTENV"

_TRUTHY = {"1", "true", "yes", "on"}

_DOTENV_LOADED: Path | None = None

logger = logging.getLogger(__name__)


def env_bool(name: str, default: bool | None) -> bool | None:
    """Return the boolean value of environment variable ``name``.

    Examples
    --------
    >>> _ = os.environ.pop('LOG_EXAMPLE_BOOL', None)
    >>> env_bool('LOG_EXAMPLE_BOOL', default=True)
    True
    >>> os.environ['LOG_EXAMPLE_BOOL'] = '0'
    >>> env_bool('LOG_EXAMPLE_BOOL', default=True)
    False
    >>> _ = os.environ.pop('LOG_EXAMPLE_BOOL')
    """
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


def should_use_dotenv(*, explicit: bool | None, env_value: str | None) -> bool:
    """Decide whether a ``.env`` file should be loaded.

    Examples
    --------
    >>> should_use_dotenv(explicit=None, env_value="yes")
    True
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(explicit=None, env_value=None)
    False
    """
    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def enable_dotenv(search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` file without overriding the environment.

    The search walks upwards from ``search_from`` (default: the working
    directory). The first successful load is remembered and returned again on
    later calls.

    Returns
    -------
    Path | None
        Resolved path of the loaded file, or ``None`` when none was found.
    """

    global _DOTENV_LOADED
    if _DOTENV_LOADED is not None:
        return _DOTENV_LOADED

    if search_from is None:
        found = find_dotenv(usecwd=True)
    else:
        found = _find_upwards(search_from)
    if not found:
        logger.debug("no .env file found")
        return None

    path = Path(found).resolve()
    load_dotenv(path, override=False)
    logger.debug("loaded environment from %s", path)
    _DOTENV_LOADED = path
    return path


def _find_upwards(start: Path) -> str:
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return str(candidate)
    return ""


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_LOADED
    _DOTENV_LOADED = None


__all__ = ["DOTENV_ENV_VAR", "enable_dotenv", "env_bool", "should_use_dotenv"]
