"""Main CLI application entry point.

Defines the Typer application: search every package manager for a
term, list the matches and, once confirmed, remove them.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler
from rich.markup import escape

from purgectl import __version__
from purgectl.cli import display
from purgectl.core.config import ConfigError, load_settings
from purgectl.core.executor import (
    execute_removals,
    get_operators,
    needs_apt_maintenance,
    run_apt_maintenance,
)
from purgectl.core.search import get_searchers, search_all
from purgectl.models.package import MatchMode, PackageSource
from purgectl.models.search_result import collect_packages
from purgectl.utils.formatting import console, err_console, print_error, print_info, print_success

# Exit codes for malformed invocations
EXIT_USAGE = 1
EXIT_NO_TERM = EXIT_USAGE
EXIT_MULTIPLE_TERMS = 2

USAGE = """\
Usage: purgectl [-e|--exact] <utility-name>
  -e, --exact    Match exact package name only (no partial matches)

Examples:
  purgectl firefox                              # Search for packages containing 'firefox'
  purgectl -e firefox                           # Search for packages exactly named 'firefox'
  purgectl --exact io.github.lainsce.Khronos    # Exact match for flatpak app"""

app = typer.Typer(
    name="purgectl",
    help="Find and uninstall packages across Flatpak, Snap and APT.",
    add_completion=False,
    rich_markup_mode="rich",
    # Unknown options reach _parse_term so they get the plain usage text
    context_settings={"help_option_names": ["-h", "--help"], "ignore_unknown_options": True},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"purgectl version {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    """Route log records to stderr through Rich.

    Args:
        verbose: Log at DEBUG level instead of WARNING.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _parse_term(terms: list[str] | None) -> str:
    """Extract the single search term from the positional arguments.

    Args:
        terms: Positional arguments.

    Returns:
        The search term.

    Raises:
        typer.Exit: With EXIT_USAGE, EXIT_NO_TERM or EXIT_MULTIPLE_TERMS
            on bad input.
    """
    unknown = [t for t in terms or [] if t.startswith("-") and t != "-"]
    if unknown:
        typer.echo(f"Error: Unknown option: {unknown[0]}")
        typer.echo(USAGE)
        raise typer.Exit(code=EXIT_USAGE)

    if not terms:
        typer.echo(USAGE)
        raise typer.Exit(code=EXIT_NO_TERM)

    if len(terms) > 1:
        typer.echo("Error: Multiple search terms provided")
        raise typer.Exit(code=EXIT_MULTIPLE_TERMS)

    return terms[0]


def _confirm_removal() -> bool:
    """Ask the user to confirm removal.

    Only a case-insensitive "yes" confirms; end of input cancels.

    Returns:
        True if user confirms, False otherwise.
    """
    try:
        answer: str = typer.prompt(
            "Do you want to uninstall these packages? (yes/no)",
            default="",
            show_default=False,
        )
    except typer.Abort:
        return False
    return answer.strip().lower() == "yes"


@app.command()
def main(
    terms: Annotated[
        list[str] | None,
        typer.Argument(
            help="Package name or search term.",
            metavar="SEARCH_TERM",
            show_default=False,
        ),
    ] = None,
    exact: Annotated[
        bool,
        typer.Option(
            "--exact",
            "-e",
            help="Match exact package name only (no partial matches).",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Search Flatpak, Snap and APT for a package and uninstall the matches.

    Every match is listed before anything is removed; removal only
    proceeds after typing "yes". APT packages are purged and their
    desktop entries, configuration and cache directories are deleted.

    Examples:
        purgectl firefox
        purgectl -e firefox
        purgectl --exact io.github.lainsce.Khronos
    """
    _configure_logging(verbose)
    term = _parse_term(terms)
    mode = MatchMode.EXACT if exact else MatchMode.SUBSTRING

    try:
        settings = load_settings()
    except ConfigError as e:
        print_error(f"Failed to load config: {e}")
        raise typer.Exit(code=1) from e

    if mode == MatchMode.EXACT:
        print_info(f"Searching for exact match '{escape(term)}' in package managers...\n")
    else:
        print_info(f"Searching for '{escape(term)}' in package managers...\n")

    search_results = search_all(
        term,
        mode,
        get_searchers(settings),
        on_start=display.print_search_header,
        on_result=lambda searcher, result: display.print_search_result(
            result,
            settings.apt_display_limit if searcher.source == PackageSource.APT else None,
        ),
    )

    packages = collect_packages(search_results)
    if not packages:
        console.print(f"[error]No packages found matching '{escape(term)}'[/]")
        return

    display.print_found_packages(packages)

    if not _confirm_removal():
        console.print("Cancelled.")
        return

    operators = get_operators(settings)
    results = execute_removals(
        packages,
        operators,
        on_start=display.print_removal_start,
        on_result=display.print_removal_result,
    )

    if needs_apt_maintenance(packages):
        print_info("Cleaning up apt cache and orphaned packages...")
        run_apt_maintenance(packages, operators)

    display.print_results_summary(results)
    print_success("Uninstallation complete!")


if __name__ == "__main__":
    app()
