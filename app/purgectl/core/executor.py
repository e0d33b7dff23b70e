"""Removal orchestration.

Provides the operator factory and the removal loop shared by the CLI.
Packages are removed one at a time, in order; a failure for one
package never prevents the next from being attempted.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from purgectl.core.config import Settings
from purgectl.models.action import CleanupResult, RemovalResult
from purgectl.models.package import FoundPackage, PackageSource
from purgectl.operators.apt import AptOperator
from purgectl.operators.base import Operator
from purgectl.operators.flatpak import FlatpakOperator
from purgectl.operators.snap import SnapOperator

logger = logging.getLogger(__name__)


def get_operators(settings: Settings | None = None) -> dict[PackageSource, Operator]:
    """Get one operator per package source.

    Args:
        settings: Runtime settings. Defaults are used if None.

    Returns:
        Mapping from package source to its operator.
    """
    settings = settings or Settings()
    operators: list[Operator] = [
        FlatpakOperator(timeout=settings.removal_timeout),
        SnapOperator(timeout=settings.removal_timeout),
        AptOperator(timeout=settings.removal_timeout),
    ]
    return {op.source: op for op in operators}


def needs_apt_maintenance(packages: list[FoundPackage]) -> bool:
    """Check if the package list contains any APT package."""
    return any(pkg.is_apt for pkg in packages)


def execute_removals(
    packages: list[FoundPackage],
    operators: dict[PackageSource, Operator],
    on_start: Callable[[FoundPackage], None] | None = None,
    on_result: Callable[[RemovalResult], None] | None = None,
) -> list[RemovalResult]:
    """Remove packages in order, tolerating per-package failures.

    Args:
        packages: Packages to remove, in display order.
        operators: Operator for each package source.
        on_start: Called before each package is processed.
        on_result: Called with each package's result.

    Returns:
        One RemovalResult per package.
    """
    results: list[RemovalResult] = []

    for package in packages:
        if on_start is not None:
            on_start(package)

        result = operators[package.source].remove(package)
        if result.failed:
            logger.warning("Failed to remove %s: %s", package, result.error)
        results.append(result)

        if on_result is not None:
            on_result(result)

    return results


def run_apt_maintenance(
    packages: list[FoundPackage],
    operators: dict[PackageSource, Operator],
) -> list[CleanupResult] | None:
    """Run APT autoremove/autoclean if any APT package was processed.

    Args:
        packages: Packages that were processed.
        operators: Operator for each package source.

    Returns:
        Results of the maintenance steps, or None if none were needed.
    """
    if not needs_apt_maintenance(packages):
        return None

    apt = operators[PackageSource.APT]
    if not isinstance(apt, AptOperator) or not apt.is_available():
        logger.info("apt-get is not available, skipping APT maintenance")
        return []

    return apt.autoremove()
