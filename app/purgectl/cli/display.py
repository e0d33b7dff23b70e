"""Shared Rich display functions for search results and removals.

Provides the section printers used while searching and the progress
and summary printers used while removing packages.
"""

from rich.markup import escape

from purgectl.models.action import RemovalResult, RemovalStatus
from purgectl.models.package import FoundPackage
from purgectl.models.search_result import QueryStatus, SearchResult
from purgectl.searchers.base import Searcher
from purgectl.utils.formatting import (
    console,
    format_package,
    print_header,
    print_raw,
    print_success,
    print_warning,
)


def print_search_header(searcher: Searcher) -> None:
    """Print the section header for a searcher."""
    print_header(searcher.title)


def truncate_output(output: str, limit: int | None) -> tuple[str, int]:
    """Truncate backend output to a maximum number of lines.

    Args:
        output: Raw backend output.
        limit: Maximum number of lines to keep, or None for no limit.

    Returns:
        Tuple of (displayed text, total line count).
    """
    lines = output.rstrip("\n").splitlines()
    if limit is None or len(lines) <= limit:
        return "\n".join(lines), len(lines)
    return "\n".join(lines[:limit]), len(lines)


def print_search_result(result: SearchResult, limit: int | None = None) -> None:
    """Print the body of a search section.

    Raw backend output is echoed verbatim. When ``limit`` is set and the
    output is longer, only the first ``limit`` lines are shown followed
    by a notice with the total.

    Args:
        result: Result of one searcher.
        limit: Maximum number of output lines to show.
    """
    if result.has_output:
        text, total = truncate_output(result.output, limit)
        print_raw(text)
        if limit is not None and total > limit:
            console.print(f"[muted]... (showing first {limit} results, total: {total})[/]")
    else:
        console.print("No matches found")
        if result.status == QueryStatus.FAILED and result.error:
            print_warning(f"{result.source.value} search failed: {escape(result.error)}")

    console.print()


def print_found_packages(packages: list[FoundPackage]) -> None:
    """Print the numbered list of packages that will be removed.

    Args:
        packages: Aggregated packages in discovery order.
    """
    print_success(f"Found {len(packages)} package(s):")
    for index, pkg in enumerate(packages, start=1):
        console.print(f"  {index}. {format_package(pkg)}", highlight=False)
    console.print()


def print_removal_start(package: FoundPackage) -> None:
    """Print the progress line for a package about to be removed."""
    console.print(
        f"[info]Uninstalling {package.source.value} package: {escape(package.identifier)}[/]",
        highlight=False,
    )


def print_removal_result(result: RemovalResult) -> None:
    """Print the outcome of a single removal.

    Args:
        result: Result of removing one package.
    """
    pkg = result.package
    identifier = escape(pkg.identifier)

    if result.status == RemovalStatus.NOT_INSTALLED:
        console.print(f"[warning]  Package {identifier} is not installed, skipping...[/]")
    elif result.failed:
        console.print(
            f"[error]Failed to uninstall {pkg.source.value} package: {identifier}[/]",
            highlight=False,
        )
        if result.error:
            console.print(f"[muted]  {escape(result.error)}[/]", highlight=False)
    elif result.cleanup:
        removed = sum(1 for c in result.cleanup if c.success)
        console.print(
            f"[muted]  Removed desktop files and associated data ({removed} step(s))[/]",
            highlight=False,
        )


def print_results_summary(results: list[RemovalResult]) -> None:
    """Print a summary of removal results.

    Shows nothing extra when every package was removed, otherwise a
    count of removed, skipped and failed packages.

    Args:
        results: Removal results.
    """
    removed = sum(1 for r in results if r.success)
    skipped = sum(1 for r in results if r.skipped)
    failed = sum(1 for r in results if r.failed)

    if skipped == 0 and failed == 0:
        return

    parts = [f"[success]{removed} removed[/success]"]
    if skipped:
        parts.append(f"[warning]{skipped} skipped[/warning]")
    if failed:
        parts.append(f"[error]{failed} failed[/error]")
    console.print("\n" + ", ".join(parts))
