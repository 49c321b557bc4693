"""Static package metadata surfaced by the CLI ``info`` command."""

from __future__ import annotations

from typing import Callable

name = "lib_log_session"
title = "Category-aware session log adapter for the Python logging stack"
version = "0.1.0"
shell_command = "lib_log_session"


def print_info(writer: Callable[[str], object] | None = None) -> None:
    """Write the metadata banner through ``writer`` (default: ``print``).

    Examples
    --------
    >>> chunks = []
    >>> print_info(writer=chunks.append)
    >>> chunks[0]
    'Info for lib_log_session:\\n\\n'
    """

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:\n\n"]
    lines.extend(f"    {label.ljust(pad)} = {value}\n" for label, value in fields)
    for line in lines:
        if writer is None:
            print(line, end="")
        else:
            writer(line)
