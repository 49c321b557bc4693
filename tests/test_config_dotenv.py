from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator

import pytest
from click.testing import CliRunner

from lib_log_session import cli as cli_module
from lib_log_session import config as log_config
from lib_log_session.domain.levels import BackendLevel
from lib_log_session.runtime import build_runtime_settings


@pytest.fixture(autouse=True)
def _reset_dotenv_state() -> Iterator[None]:
    """Reset shared dotenv state around each test."""

    log_config._reset_dotenv_state_for_testing()
    yield
    log_config._reset_dotenv_state_for_testing()


def test_dotenv_value_reaches_runtime_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """A console level read from the nearest .env wins over the call argument."""

    nested = tmp_path / "nested"
    nested.mkdir()
    env_file = tmp_path / ".env"
    env_file.write_text("LOG_CONSOLE_LEVEL=debug\n")
    monkeypatch.chdir(nested)
    monkeypatch.delenv("LOG_CONSOLE_LEVEL", raising=False)

    loaded = log_config.enable_dotenv()

    assert loaded == env_file.resolve()
    assert build_runtime_settings(console_level="error").console_level is BackendLevel.DEBUG

    os.environ.pop("LOG_CONSOLE_LEVEL", None)


def test_enable_dotenv_respects_existing_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Existing environment variables keep precedence over .env entries."""

    nested = tmp_path / "nested"
    nested.mkdir()
    (tmp_path / ".env").write_text("LOG_CONSOLE_LEVEL=debug\n")
    monkeypatch.chdir(nested)
    monkeypatch.setenv("LOG_CONSOLE_LEVEL", "error")

    result = log_config.enable_dotenv()

    assert result is not None
    assert build_runtime_settings(console_level="info").console_level is BackendLevel.ERROR


def test_enable_dotenv_from_explicit_start(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    deep = tmp_path / "a" / "b"
    deep.mkdir(parents=True)
    env_file = tmp_path / "a" / ".env"
    env_file.write_text("LOG_CATEGORY_LEVELS=sql=trace\n")
    monkeypatch.delenv("LOG_CATEGORY_LEVELS", raising=False)

    assert log_config.enable_dotenv(search_from=deep) == env_file.resolve()
    assert os.environ["LOG_CATEGORY_LEVELS"] == "sql=trace"
    assert build_runtime_settings().category_levels == {"sql": BackendLevel.TRACE}
    assert log_config.enable_dotenv(search_from=tmp_path) == env_file.resolve()

    os.environ.pop("LOG_CATEGORY_LEVELS", None)


@pytest.mark.parametrize(
    "explicit, env_value, expected",
    [
        (True, None, True),
        (False, "1", False),
        (None, "on", True),
        (None, "0", False),
        (None, None, False),
    ],
)
def test_should_use_dotenv_precedence(explicit: bool | None, env_value: str | None, expected: bool) -> None:
    assert log_config.should_use_dotenv(explicit=explicit, env_value=env_value) is expected


def test_cli_dotenv_toggle_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    """CLI flag wins over environment toggle when deciding whether to load .env."""

    runner = CliRunner()

    calls: list[tuple[tuple[object, ...], dict[str, object]]] = []

    def record_enable(*args: object, **kwargs: object) -> None:
        calls.append((args, kwargs))

    monkeypatch.setattr(log_config, "enable_dotenv", record_enable)
    monkeypatch.delenv(log_config.DOTENV_ENV_VAR, raising=False)

    result = runner.invoke(cli_module.cli, ["--use-dotenv", "info"])
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    env = {log_config.DOTENV_ENV_VAR: "1"}
    result = runner.invoke(cli_module.cli, ["info"], env=env)
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    result = runner.invoke(cli_module.cli, ["--no-use-dotenv", "info"], env=env)
    assert result.exit_code == 0
    assert calls == []
