"""Shared Rich consoles and message helpers.

Normal output (section headers, backend output, the package list) goes
to ``console`` on stdout. Warnings, errors and log records go to
``err_console`` on stderr.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from rich.console import Console

from purgectl.core.theme import get_theme

if TYPE_CHECKING:
    from purgectl.models.package import FoundPackage


def _make_console(*, stderr: bool = False) -> Console:
    # Force truecolor on a terminal so hex theme colors are not downsampled
    stream = sys.stderr if stderr else sys.stdout
    color_system = "truecolor" if stream.isatty() else None
    return Console(theme=get_theme(), stderr=stderr, color_system=color_system)


console = _make_console()
err_console = _make_console(stderr=True)


def format_package(pkg: FoundPackage) -> str:
    """Render a package as ``source:identifier`` with the source in its color."""
    source = pkg.source.value
    return f"[{source}]{source}[/]:{pkg.identifier}"


def print_header(title: str) -> None:
    console.print(f"[header]=== {title} ===[/]")


def print_raw(text: str) -> None:
    """Echo backend output exactly as received.

    Written straight to the console stream: Rich rendering would expand
    tabs and replace emoji codes such as ``:smile:``.
    """
    console.file.write(f"{text}\n")
    console.file.flush()


def print_info(message: str) -> None:
    console.print(f"[info]{message}[/]")


def print_success(message: str) -> None:
    console.print(f"[success]{message}[/]")


def print_warning(message: str) -> None:
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    err_console.print(f"[error]Error:[/] {message}")
