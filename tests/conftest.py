from __future__ import annotations

from dataclasses import dataclass, field
from io import StringIO
from typing import Iterator

import pytest
from rich.console import Console

from lib_log_session import runtime
from lib_log_session.domain.levels import BackendLevel


@dataclass
class RecordingLogger:
    """Backend handle capturing writes and answering level queries from a set."""

    name: str
    enabled: set[BackendLevel] = field(default_factory=lambda: set(BackendLevel) - {BackendLevel.OFF})
    calls: list[tuple[str, str]] = field(default_factory=list)

    def trace(self, message: str) -> None:
        self.calls.append(("trace", message))

    def debug(self, message: str) -> None:
        self.calls.append(("debug", message))

    def info(self, message: str) -> None:
        self.calls.append(("info", message))

    def warn(self, message: str) -> None:
        self.calls.append(("warn", message))

    def error(self, message: str) -> None:
        self.calls.append(("error", message))

    def is_trace_enabled(self) -> bool:
        return BackendLevel.TRACE in self.enabled

    def is_debug_enabled(self) -> bool:
        return BackendLevel.DEBUG in self.enabled

    def is_info_enabled(self) -> bool:
        return BackendLevel.INFO in self.enabled

    def is_warn_enabled(self) -> bool:
        return BackendLevel.WARN in self.enabled

    def is_error_enabled(self) -> bool:
        return BackendLevel.ERROR in self.enabled


class RecordingFactory:
    """Factory handing out one :class:`RecordingLogger` per name."""

    def __init__(self) -> None:
        self.requested: list[str] = []
        self.loggers: dict[str, RecordingLogger] = {}

    def get_logger(self, name: str) -> RecordingLogger:
        self.requested.append(name)
        handle = RecordingLogger(name)
        self.loggers[name] = handle
        return handle

    def all_calls(self) -> list[tuple[str, str, str]]:
        return [(name, level, message) for name, handle in self.loggers.items() for level, message in handle.calls]


@pytest.fixture
def recording_factory() -> RecordingFactory:
    return RecordingFactory()


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=200, color_system=None)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "LOG_CONSOLE_LEVEL",
        "LOG_CATEGORY_LEVELS",
        "LOG_DISPLAY_DATA",
        "LOG_FORCE_COLOR",
        "LOG_NO_COLOR",
        "LOG_CONSOLE_STYLES",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def reset_runtime(clean_env: None) -> Iterator[None]:
    try:
        yield
    finally:
        if runtime.is_initialised():
            runtime.shutdown()
