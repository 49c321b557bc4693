"""Command line interface for inspecting and demonstrating the adapter.

Purpose
-------
Give operators a quick way to see which backend logger names to configure,
how session levels translate, and what the console output looks like.

Contents
--------
* :func:`cli` – click group with ``info``, ``categories``, ``levels`` and
  ``logdemo`` commands.
* :func:`main` – entry point running the group through ``lib_cli_exit_tools``.
"""

from __future__ import annotations

import os
from typing import Sequence

import click
import lib_cli_exit_tools

from . import __init__conf__
from . import config as log_config
from .domain.categories import DEFAULT_CATEGORY, LOGGER_CATEGORIES, logger_name
from .domain.levels import SessionLevel, translate
from .runtime import logdemo as _logdemo
from .runtime import summary_info

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(version=__init__conf__.version, prog_name=__init__conf__.shell_command, message="%(prog)s version %(version)s")
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help=f"Load environment variables from a nearby .env (also enabled by {log_config.DOTENV_ENV_VAR}=1).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool) -> None:
    """Session log adapter utilities."""

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not click.core.ParameterSource.DEFAULT:
        explicit = use_dotenv
    if log_config.should_use_dotenv(explicit=explicit, env_value=os.getenv(log_config.DOTENV_ENV_VAR)):
        log_config.enable_dotenv()

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print package metadata."""

    click.echo(summary_info(), nl=False)


@cli.command("categories", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_categories() -> None:
    """List session log categories and their backend logger names."""

    names = (*LOGGER_CATEGORIES, DEFAULT_CATEGORY)
    width = max(len(category) for category in names)
    for category in names:
        click.echo(f"{category.ljust(width)}  {logger_name(category)}")


@cli.command("levels", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_levels() -> None:
    """Print how session levels translate to backend levels."""

    width = max(len(level.name) for level in SessionLevel)
    for level in SessionLevel:
        click.echo(f"{level.name.ljust(width)}  ({int(level)})  -> {translate(level).name}")


@cli.command("logdemo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--category", default="sql", show_default=True, help="Category the sample entries are logged under.")
@click.option("--level", "console_level", default="trace", show_default=True, help="Backend threshold for the demo.")
@click.option("--display-data", is_flag=True, default=False, help="Show bound parameter values in sql messages.")
@click.option("--force-color", is_flag=True, default=False, help="Force ANSI colours even without a terminal.")
@click.option("--no-color", is_flag=True, default=False, help="Disable colours.")
def cli_logdemo(category: str, console_level: str, display_data: bool, force_color: bool, no_color: bool) -> None:
    """Emit one sample entry per session level."""

    try:
        results = _logdemo(
            category=category,
            console_level=console_level,
            display_data=True if display_data else None,
            force_color=force_color,
            no_color=no_color,
        )
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--level") from exc

    for result in results:
        outcome = "emitted" if result["logged"] else "suppressed"
        click.echo(f"{result['level']:<8} -> {result['backend_level']:<5} {result['logger']} {outcome}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and restore traceback preferences afterwards.

    Returns
    -------
    int
        Exit code reported by ``lib_cli_exit_tools``.
    """

    previous_traceback = lib_cli_exit_tools.config.traceback
    previous_force_color = lib_cli_exit_tools.config.traceback_force_color
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        lib_cli_exit_tools.config.traceback = previous_traceback
        lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main"]
