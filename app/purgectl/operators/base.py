"""Abstract base class for package operators.

This module defines the Operator interface that all package removal
operators must implement.
"""

import logging
from abc import ABC, abstractmethod

from purgectl.models.action import RemovalResult, RemovalStatus
from purgectl.models.package import FoundPackage, PackageSource
from purgectl.utils.shell import CommandResult

logger = logging.getLogger(__name__)


class Operator(ABC):
    """Abstract base class for all package operators.

    Operators remove a single package through one package manager and
    report the outcome as a RemovalResult. They never raise for a
    failing command, so one failure cannot stop a batch of removals.

    Example:
        >>> operator = SnapOperator()
        >>> result = operator.remove(FoundPackage(PackageSource.SNAP, "vlc"))
        >>> print(result.status)
    """

    # Timeout for removal operations (5 minutes)
    DEFAULT_TIMEOUT: float = 300.0

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        """Initialize the operator.

        Args:
            timeout: Timeout in seconds for removal commands.
        """
        self._timeout = timeout

    @property
    @abstractmethod
    def source(self) -> PackageSource:
        """Return the package source this operator handles."""

    @abstractmethod
    def is_available(self) -> bool:
        """Check if this package manager is available on the system."""

    @abstractmethod
    def _remove(self, package: FoundPackage) -> RemovalResult:
        """Remove a package known to belong to this operator's source."""

    def remove(self, package: FoundPackage) -> RemovalResult:
        """Remove a package.

        Args:
            package: Package to remove.

        Returns:
            RemovalResult describing the outcome.

        Raises:
            ValueError: If the package's source doesn't match this operator.
        """
        if package.source != self.source:
            msg = (
                f"Package source {package.source.value} doesn't match "
                f"operator source {self.source.value}"
            )
            raise ValueError(msg)

        if not self.is_available():
            logger.warning("%s is not available, cannot remove %s", self.source.value, package)
            return RemovalResult(
                package=package,
                status=RemovalStatus.UNAVAILABLE,
                error=f"{self.source.value} is not available on this system",
            )

        return self._remove(package)

    def _create_result(self, package: FoundPackage, result: CommandResult) -> RemovalResult:
        """Create a RemovalResult from a CommandResult.

        Args:
            package: The package that was processed.
            result: The command execution result.

        Returns:
            RemovalResult with appropriate success/error info.
        """
        if result.success:
            return RemovalResult(
                package=package,
                status=RemovalStatus.REMOVED,
                message="Operation completed",
            )

        error_msg = (
            result.stderr.strip() or result.stdout.strip() or f"{self.source.value} command failed"
        )
        return RemovalResult(package=package, status=RemovalStatus.FAILED, error=error_msg)
